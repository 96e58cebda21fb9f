from django.utils.text import slugify


def generate_toc_id(text: str) -> str:
    """
    Convert heading text to an anchor id.

    Unicode letters are kept ("Café Menü" -> "café-menü"); punctuation is
    dropped and whitespace runs become a single hyphen. Empty or
    punctuation-only text yields an empty string.
    """
    return slugify(text, allow_unicode=True)
