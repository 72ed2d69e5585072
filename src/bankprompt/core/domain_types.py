"""Domain types - Immutable Pydantic models defining the prompt data model.

This module contains the core data structures of the library:

- Section: one labeled unit of prompt content (Goal, Role, Step, Output)
- Prompt: an ordered sequence of sections with a canonical text rendering
- PromptBuilder: a fluent, order-preserving constructor for a Prompt

All models are frozen (immutable). Growing a prompt or a builder always
returns a new value, so two call chains can never observe each other's
additions.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SectionKind(str, Enum):
    """The closed set of section kinds.

    Values are the exact labels used in the rendered prompt text.
    """

    GOAL = "Goal"
    ROLE = "Role"
    STEP = "Step"
    OUTPUT = "Output"


class Section(BaseModel):
    """One labeled unit of prompt content.

    Attributes:
        kind: Which of the four section kinds this is.
        text: The payload. Not validated; empty strings are allowed.
    """

    model_config = ConfigDict(frozen=True)

    kind: SectionKind
    text: str

    @classmethod
    def goal(cls, text: str) -> Section:
        """Convenience constructor for a Goal section."""
        return cls(kind=SectionKind.GOAL, text=text)

    @classmethod
    def role(cls, text: str) -> Section:
        """Convenience constructor for a Role section."""
        return cls(kind=SectionKind.ROLE, text=text)

    @classmethod
    def step(cls, text: str) -> Section:
        """Convenience constructor for a Step section."""
        return cls(kind=SectionKind.STEP, text=text)

    @classmethod
    def output(cls, text: str) -> Section:
        """Convenience constructor for an Output section."""
        return cls(kind=SectionKind.OUTPUT, text=text)

    @property
    def label(self) -> str:
        """The capitalized label shown in the rendered line."""
        return self.kind.value

    def render(self) -> str:
        """Format as a single ``"<Label>: <payload>"`` line."""
        return f"{self.label}: {self.text}"


class Prompt(BaseModel):
    """An ordered sequence of sections.

    Insertion order is preserved exactly: no deduplication, no reordering
    and no cap on length. A prompt with zero sections is valid and renders
    to the empty string.

    Attributes:
        sections: The sections in the order they were added.
    """

    model_config = ConfigDict(frozen=True)

    sections: tuple[Section, ...] = ()

    @classmethod
    def new(cls) -> Prompt:
        """Create an empty prompt."""
        return cls()

    def _append(self, section: Section) -> Prompt:
        """Return new prompt with section appended (immutable update).

        Only PromptBuilder grows prompts; a prompt handed out of
        ``build()`` is read-only.

        Args:
            section: The section to add at the end.

        Returns:
            New Prompt with one more section.
        """
        return Prompt(sections=(*self.sections, section))

    def render(self) -> str:
        """Render the canonical text form sent to generation backends.

        One ``"<Label>: <payload>"`` line per section, joined by a single
        newline. No trailing newline and no blank separator lines.

        Returns:
            The rendered prompt text, or "" for an empty prompt.
        """
        return "\n".join(section.render() for section in self.sections)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.sections)


class PromptBuilder(BaseModel):
    """Fluent builder for creating prompts.

    Each add method returns a new builder with one more section, leaving
    the receiver untouched. This allows chaining and makes it safe to keep
    a partially built builder around as the base for several prompts.

    Usage:
        prompt = (
            PromptBuilder.new()
            .goal("Evaluate loan application")
            .role("Credit Analyst")
            .step("Review credit score and history")
            .output("Approval recommendation with terms")
            .build()
        )
    """

    model_config = ConfigDict(frozen=True)

    prompt: Prompt = Field(default_factory=Prompt)

    @classmethod
    def new(cls) -> PromptBuilder:
        """Create a builder wrapping an empty prompt."""
        return cls()

    def _add(self, section: Section) -> PromptBuilder:
        return PromptBuilder(prompt=self.prompt._append(section))

    def goal(self, text: str) -> PromptBuilder:
        """Add a goal section."""
        return self._add(Section.goal(text))

    def role(self, text: str) -> PromptBuilder:
        """Add a role section."""
        return self._add(Section.role(text))

    def step(self, text: str) -> PromptBuilder:
        """Add a step section. Repeated calls keep every step in order."""
        return self._add(Section.step(text))

    def output(self, text: str) -> PromptBuilder:
        """Add an output format section."""
        return self._add(Section.output(text))

    def build(self) -> Prompt:
        """Finish building and return the prompt.

        No validation is performed; an empty prompt is a legal result.
        """
        return self.prompt
