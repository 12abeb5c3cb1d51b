from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

@dataclass
class GamescopeConfig:
    enabled: bool
    output_width: str
    output_height: str
    game_width: str
    game_height: str
    fullscreen: bool = True
    relative_mouse: bool = False    # --force-grab-cursor

@dataclass
class AppConfig:
    runner: str
    prefix: str
    gamescope: GamescopeConfig
    dxvk: bool = False
    executable: Optional[str] = None    # None=must be given to `run`

@dataclass
class Invocation:
    program: str
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)   # whole child environment

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def with_args(self, *extra: str) -> "Invocation":
        return replace(self, args=[*self.args, *extra], env=dict(self.env))
