from __future__ import annotations

import enum
import logging

from .errors import EmptyInputError

logger = logging.getLogger(__name__)


class NameSplitPolicy(str, enum.Enum):
    """How a free-text name with other than two tokens becomes search params."""

    # One token or three-plus tokens: only the first token is searched.
    FIRST_TOKEN = "first_token"
    # Three-plus tokens: first token as first_name, last token as last_name.
    FIRST_LAST = "first_last"


def build_search_params(
    name: str | None, policy: NameSplitPolicy = NameSplitPolicy.FIRST_TOKEN
) -> dict[str, str]:
    """Turn a free-text name into individual_search query parameters.

    Raises EmptyInputError when the name has no tokens. Tokens are passed
    through unvalidated.
    """
    tokens = (name or "").split()
    if not tokens:
        raise EmptyInputError()
    if len(tokens) == 2:
        return {"first_name": tokens[0], "last_name": tokens[1]}
    if len(tokens) > 2 and policy == NameSplitPolicy.FIRST_LAST:
        return {"first_name": tokens[0], "last_name": tokens[-1]}
    if len(tokens) > 2:
        logger.debug("Dropping extra name tokens %r", tokens[1:])
    return {"first_name": tokens[0]}


__all__ = ["NameSplitPolicy", "build_search_params"]
