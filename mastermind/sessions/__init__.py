from .codebreaker import CodebreakerSession, BreakerState
from .codemaker import CodemakerSession, MakerState

__all__ = ["CodebreakerSession", "BreakerState", "CodemakerSession", "MakerState"]
