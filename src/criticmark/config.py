"""Plugin configuration for criticmark.

One MarkupConfig is bound to each plugin registration. The namespace decides
the CSS class prefix (``{namespace}-addition``) and the token type prefix
(``{namespace}_addition_open``); two namespaces are built in, "criticmarkup"
and "mdmarkup", and both follow identical structural rules.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from criticmark.config import MarkupConfig
    >>> from criticmark.plugin import markup_plugin
    >>>
    >>> md = MarkdownIt().use(markup_plugin, config=MarkupConfig(namespace="review"))
    >>> md.render("{++new++}")
    '<p><ins class="review-addition">new</ins></p>\\n'

Thread Safety:
MarkupConfig is frozen (immutable after creation) and safe to share.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from criticmark.catalog import AnnotationKind
from criticmark.errors import ConfigError
from criticmark.tokens import WrapperPart, token_type

_NAMESPACE_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


@dataclass(frozen=True, slots=True)
class MarkupConfig:
    """Immutable plugin configuration.

    Attributes:
        namespace: CSS class prefix, also used (with ``-`` → ``_``) for token types
        multiline_blocks: Register the block rule that keeps line-start
            multi-line annotations from being split at blank lines

    """

    namespace: str = "criticmarkup"
    multiline_blocks: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.namespace, str) or not _NAMESPACE_RE.fullmatch(self.namespace):
            raise ConfigError(
                "namespace",
                f"{self.namespace!r} is not a valid CSS class prefix",
            )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> MarkupConfig:
        """Create MarkupConfig from dictionary.

        Only includes keys that are valid MarkupConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> MarkupConfig.from_dict({"namespace": "mdmarkup", "other": 1}).namespace
            'mdmarkup'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    @property
    def token_prefix(self) -> str:
        return self.namespace.replace("-", "_")

    @property
    def inline_rule_name(self) -> str:
        return self.token_prefix

    @property
    def block_rule_name(self) -> str:
        return f"{self.token_prefix}_block"

    def css_class(self, kind: AnnotationKind) -> str:
        """CSS class for a kind, e.g. ``criticmarkup-addition``."""
        return f"{self.namespace}-{kind.value}"

    def token_type(self, kind: AnnotationKind, part: WrapperPart, nesting: int) -> str:
        return token_type(self.token_prefix, kind, part, nesting)


__all__ = [
    "MarkupConfig",
]
