"""
Plain text formatter for handler output.
"""

from ..models import TodoItem, CatFact


class TextFormatter:
    """Formats decoded upstream records as response bodies"""

    DOUBLE_TEMPLATE = "Todo: {title}, Cat Fact: {text}"

    @staticmethod
    def format_basic(todo: TodoItem) -> str:
        """The title, unchanged"""
        return todo.title

    @classmethod
    def format_double(cls, todo: TodoItem, fact: CatFact) -> str:
        """
        Compose both records.

        >>> TextFormatter.format_double(TodoItem(title="a"), CatFact(text="b"))
        'Todo: a, Cat Fact: b'
        """
        return cls.DOUBLE_TEMPLATE.format(title=todo.title, text=fact.text)
