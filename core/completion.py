"""Editor-independent suggestion session.

The host calls ``trigger`` after every text change, renders the result of
``suggestions`` and calls ``accept`` with the row the user picked.
"""

from dataclasses import dataclass

from core.boundary import TriggerContext


@dataclass(frozen=True)
class ActiveSuggestion:
    """A provider together with the span it was triggered for."""
    provider: object
    context: TriggerContext


class TermCompletion:
    """Routes cursor positions to the first provider that applies."""

    def __init__(self, providers):
        """Initialize session.

        Args:
            providers: SuggestionProviders in priority order
        """
        self.providers = list(providers)

    def trigger(self, buffer) -> ActiveSuggestion | None:
        """Find the provider and span for the current cursor position.

        Args:
            buffer: TextBuffer being edited

        Returns:
            ActiveSuggestion, or None if no provider applies
        """
        cursor = buffer.get_cursor()
        line = buffer.get_line(cursor.line)
        for provider in self.providers:
            context = provider.on_trigger(line, cursor.ch)
            if context is not None:
                return ActiveSuggestion(provider, TriggerContext(context.start, context.end, context.query, cursor.line))
        return None

    async def suggestions(self, active: ActiveSuggestion) -> list[str]:
        """Compute the rows to render, at most ``provider.limit`` of them."""
        values = await active.provider.get_suggestions(active.context)
        return values[:active.provider.limit]

    def render(self, active: ActiveSuggestion, values) -> list[str]:
        """Row labels for ``values``."""
        return [active.provider.render_suggestion(value) for value in values]

    def is_current(self, active: ActiveSuggestion, buffer) -> bool:
        """Check that the buffer still holds the span ``active`` was made for.

        Results computed for a stale span are discarded by the host.
        """
        fresh = self.trigger(buffer)
        return fresh is not None and fresh == active

    def accept(self, active: ActiveSuggestion, value: str, document):
        """Apply the chosen suggestion."""
        active.provider.select_suggestion(value, active.context, document)
