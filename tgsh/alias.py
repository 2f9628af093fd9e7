"""Shell aliasing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable


@dataclass
class AliasRuleCtx:
    """Values handed to an alias rule."""

    alias_name: str
    sh: Any = None
    ctx: Any = None
    rt: Any = None


AliasRule = Callable[[AliasRuleCtx], bool]


@dataclass
class AliasInfo:
    """An alias substitution and the predicate deciding whether it applies."""

    subst: str
    rule: AliasRule

    @classmethod
    def always(cls, subst: object) -> AliasInfo:
        return cls(str(subst), lambda _ctx: True)

    @classmethod
    def with_rule(cls, subst: object, rule: AliasRule) -> AliasInfo:
        return cls(str(subst), rule)


class Alias:
    """Query and set aliases; several aliases may share a name."""

    def __init__(self) -> None:
        self._aliases: dict[str, list[AliasInfo]] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[object, object]]) -> Alias:
        """Build unconditional aliases from (name, substitution) pairs."""
        alias = cls()
        for name, subst in pairs:
            alias.set(str(name), AliasInfo.always(subst))
        return alias

    def get(self, alias_ctx: AliasRuleCtx) -> list[str]:
        """All substitutions for the name whose rule accepts the context."""
        return [
            info.subst
            for info in self._aliases.get(alias_ctx.alias_name, [])
            if info.rule(alias_ctx)
        ]

    def set(self, alias_name: str, alias_info: AliasInfo) -> None:
        self._aliases.setdefault(alias_name, []).append(alias_info)

    def unset(self, alias_name: str) -> None:
        """Remove every alias with this name."""
        self._aliases.pop(alias_name, None)

    def clear(self) -> None:
        self._aliases.clear()