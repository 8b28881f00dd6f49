"""Table name resolution for entity types."""

import re

import inflection

# -o nouns taking -oes that inflection's rules leave out
_O_TO_OES = re.compile(r"(?i)(volcan|ech|embarg|her|mosquit|torped|vet)o$")

# Splits "OrderItem" into ("Order", "Item") so only the last word is inflected
_LAST_WORD = re.compile(r"^(.*?)([A-Z]?[a-z0-9]*)$")


def pluralize(word: str) -> str:
    """Return the English plural of a single word.

    Args:
        word: Singular noun.

    Returns:
        Plural form, keeping the casing of the leading characters.
    """
    if _O_TO_OES.search(word):
        return word + "es"
    return inflection.pluralize(word)


def table_name_for(entity_type: type) -> str:
    """Derive the table name for an entity type.

    The last word of the class name is pluralized and the result is
    lower-cased: ``Customer`` -> ``customers``, ``OrderCategory`` ->
    ``ordercategories``.

    Args:
        entity_type: Entity class.

    Returns:
        Table name used as the document key.
    """
    match = _LAST_WORD.match(entity_type.__name__)
    head, last = match.group(1), match.group(2)
    if not last:
        head, last = "", entity_type.__name__
    return (head + pluralize(last)).lower()
