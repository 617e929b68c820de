from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

# Fixed game rules
STACK_SIZE = 7
FEEDBACK_SECONDS = 0.5  # locked "correct"/"incorrect" display before the next turn
SCORE_TICK_SECONDS = 0.1  # visible score counts up one point per tick

DEFAULT_WORDLIST = Path(__file__).resolve().parent / 'data' / 'wordlist.txt'

class Settings(BaseModel):
    wordlist_path: Path = DEFAULT_WORDLIST
    log_level: str = 'INFO'
    cors_origins: List[str] = ['*']

def load_settings(environ: Optional[dict] = None) -> Settings:
    env = os.environ if environ is None else environ
    values = {}
    if env.get('WORDSTACK_WORDLIST'):
        values['wordlist_path'] = Path(env['WORDSTACK_WORDLIST'])
    if env.get('WORDSTACK_LOG_LEVEL'):
        values['log_level'] = env['WORDSTACK_LOG_LEVEL'].upper()
    if env.get('WORDSTACK_CORS_ORIGINS'):
        values['cors_origins'] = [o.strip() for o in env['WORDSTACK_CORS_ORIGINS'].split(',') if o.strip()]
    return Settings(**values)
