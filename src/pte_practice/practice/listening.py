"""Listening multiple-choice checks."""

from pte_practice.models.practice import ListeningItem, ListeningVerdict, PublicListeningItem


def check_listening_answer(item: ListeningItem, choice: int) -> ListeningVerdict:
    """Check a chosen option index; indices outside the options are wrong."""
    correct = 0 <= choice < len(item.options) and item.options[choice].correct
    return ListeningVerdict(correct=correct, explain=item.explain)


def public_listening_item(item: ListeningItem) -> PublicListeningItem:
    """Listening item as shown before answering, without the answer key."""
    return PublicListeningItem(
        prompt=item.prompt,
        audio_text=item.audio_text,
        options=[option.text for option in item.options],
    )
