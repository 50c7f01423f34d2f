# link_finder/crawler/robots.py
"""
Parser and checker for robots.txt rules.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit


class RobotsTxtRules:
    """
    Парсит robots.txt (RFC 9309).
    Пустое Disallow считается разрешением всех путей.
    Побеждает самое длинное совпавшее правило, при равенстве Allow.
    """
    _Directive = Tuple[str, str]
    _WILDCARD_RE = re.compile(r"(\*|\$)")

    def __init__(self, text: str) -> None:
        self._groups: List[Dict[str, list]] = []
        self._regex_cache: Dict[str, re.Pattern[str]] = {}
        self._parse(text)

    def can_fetch(self, user_agent: str, path: str) -> bool:
        """Return True if *user_agent* may fetch *path* (path plus optional query)."""
        directives = self._match_directives(user_agent)
        best_len = -1
        allow: Optional[bool] = None
        for directive, pattern in directives:
            if not self._match_path(path, pattern):
                continue
            length = self._rule_len(pattern)
            if length > best_len or (length == best_len and directive == "allow"):
                best_len = length
                allow = directive == "allow"
        return True if allow is None else allow

    def _parse(self, text: str) -> None:
        current: Optional[Dict[str, list]] = None
        in_rules = False
        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            key, _, val = line.partition(":")
            key = key.lower().strip()
            val = val.strip()
            if key == "user-agent":
                # consecutive User-agent lines share one group
                if current is None or in_rules:
                    current = {"agents": [], "directives": []}
                    self._groups.append(current)
                    in_rules = False
                current["agents"].append(val.lower())
            elif key in ("allow", "disallow"):
                if current is None:
                    continue
                in_rules = True
                if key == "disallow" and not val:
                    # пустой Disallow разрешает все, пропускаем
                    continue
                current["directives"].append((key, val))

    def _match_directives(self, user_agent: str) -> List[_Directive]:
        ua = user_agent.lower()
        specific: List[RobotsTxtRules._Directive] = []
        matched = False
        for group in self._groups:
            if any(agent not in ("", "*") and ua.startswith(agent) for agent in group["agents"]):
                matched = True
                specific.extend(group["directives"])
        if matched:
            return specific
        wildcard: List[RobotsTxtRules._Directive] = []
        for group in self._groups:
            if "*" in group["agents"]:
                wildcard.extend(group["directives"])
        return wildcard

    def _match_path(self, path: str, pattern: str) -> bool:
        if pattern not in self._regex_cache:
            esc = re.escape(pattern).replace(r"\*", ".*")
            if pattern.endswith("$"):
                esc = esc[:-2] + "$"
            self._regex_cache[pattern] = re.compile(f"^{esc}")
        return bool(self._regex_cache[pattern].match(path))

    @classmethod
    def _rule_len(cls, pattern: str) -> int:
        return len(cls._WILDCARD_RE.sub("", pattern))


@dataclass(slots=True)
class RobotsPolicy:
    """Parsed robots.txt of the crawled site plus the in-scope sitemaps it lists.

    Without rules (robots.txt missing or unreachable) everything is allowed.
    """

    rules: Optional[RobotsTxtRules] = None
    sitemaps: List[str] = field(default_factory=list)

    def allows(self, url: str, user_agent: str) -> bool:
        if self.rules is None:
            return True
        parts = urlsplit(url)
        target = parts.path or "/"
        if parts.query:
            target = f"{target}?{parts.query}"
        return self.rules.can_fetch(user_agent, target)
