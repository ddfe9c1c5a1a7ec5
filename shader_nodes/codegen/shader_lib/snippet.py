from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Snippet:
    """
    Fixed multi-statement WGSL expansion.

    `temps` names every identifier the snippet declares; each one is given
    a fresh variable name at expansion time, in the order listed. `lines`
    are str.format templates over those names plus the caller's inputs
    (literal braces are doubled).
    """
    temps: Tuple[str, ...]
    lines: Tuple[str, ...]

    def expand(self, ctx, **inputs) -> Dict[str, str]:
        """Emit the snippet into `ctx` and return temp name -> variable."""
        names = {temp: ctx.new_var() for temp in self.temps}
        for line in self.lines:
            ctx.emit(line.format(**names, **inputs))
        return names
