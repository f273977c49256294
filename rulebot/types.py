"""
Type definitions for the rule-based support classifier.

Defines Pydantic models for the rule catalog, the canned responses
and the HTTP request/response bodies.
"""
from typing import Any, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from .matching import has_any, has_any_word


class ResponseTemplate(BaseModel):
    """
    A canned troubleshooting response.

    Either a free-text ``body`` or an ordered checklist of ``steps``
    with an optional ``tip``.

    Attributes:
        title: Headline shown first in the reply
        body: Free-text answer (greeting and fallback responses)
        steps: Ordered checklist steps
        tip: Closing hint appended after the steps
    """
    model_config = ConfigDict(frozen=True)

    title: str
    body: Optional[str] = None
    steps: Optional[Tuple[str, ...]] = None
    tip: Optional[str] = None

    @property
    def has_steps(self) -> bool:
        return self.steps is not None

    def render(self) -> str:
        """
        Flatten the response into the plain-text reply.

        Examples:
            >>> ResponseTemplate(title="T", body="B").render()
            'T\\n\\nB'
            >>> ResponseTemplate(title="T", steps=("a", "b"), tip="x").render()
            'T\\n\\n- a\\n- b\\n\\nTip: x'
        """
        if self.has_steps:
            checklist = "\n- ".join(self.steps)
            return f"{self.title}\n\n- {checklist}\n\nTip: {self.tip or ''}".strip()
        return f"{self.title}\n\n{self.body or ''}".strip()

    def as_payload(self) -> dict:
        """Reply text plus the structured fields that are set."""
        fields = self.model_dump(exclude_none=True)
        if "steps" in fields:
            fields["steps"] = list(fields["steps"])
        return {"reply": self.render(), **fields}


class CategoryRule(BaseModel):
    """
    One entry of the rule catalog.

    Attributes:
        name: Short identifier of the category (used in logs)
        keywords: Lowercase trigger substrings
        response: Response returned when any keyword matches
        whole_word: Match keywords only at word boundaries
    """
    model_config = ConfigDict(frozen=True)

    name: str
    keywords: FrozenSet[str]
    response: ResponseTemplate
    whole_word: bool = False

    def matches(self, text: str) -> bool:
        """Check a normalized message against this rule's keywords."""
        if self.whole_word:
            return has_any_word(text, self.keywords)
        return has_any(text, self.keywords)

    @field_validator("keywords")
    @classmethod
    def _lowercase(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(k.lower() for k in v)


def _js_string(value: Any) -> str:
    """String conversion following JavaScript's toString rules."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(_js_string(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


class ChatRequest(BaseModel):
    """Body of ``POST /api/chat``. ``message`` may be any JSON value."""
    message: Any = None

    def text(self) -> str:
        """
        Coerce ``message`` to a string the way JavaScript's ``toString`` does.

        Falsy values (missing, null, false, 0, "") become "". Objects and
        arrays are always truthy: objects read as "[object Object]",
        arrays join their items with ",".

        Examples:
            >>> ChatRequest(message=42).text()
            '42'
            >>> ChatRequest(message=True).text()
            'true'
            >>> ChatRequest(message=["wifi", None, 2.0]).text()
            'wifi,,2'
            >>> ChatRequest().text()
            ''
        """
        m = self.message
        if not isinstance(m, (dict, list)) and not m:
            return ""
        return _js_string(m)


class ChatReply(BaseModel):
    """Successful chat response: flat reply plus the structured template."""
    reply: str
    title: str
    body: Optional[str] = None
    steps: Optional[Tuple[str, ...]] = None
    tip: Optional[str] = None


class ErrorReply(BaseModel):
    error: str
