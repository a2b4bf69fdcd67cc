"""Naming conventions for generated module artifacts.

Turns a user-supplied module name such as ``"Blog/Post"`` into the set of
identifiers the scaffolder needs: the model and controller class names, the
table name, the route prefix slug and the model variable name.

Pluralization is dictionary based: uncountable words are left alone,
irregular words are looked up, and everything else goes through an ordered
table of suffix rules where the first matching rule wins.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Module name segments
# ---------------------------------------------------------------------------

_SEGMENT_SEPARATORS = re.compile(r"[\\/.]+")


def module_segments(name: str) -> list[str]:
    """Split a namespaced module name into its non-empty segments.

    ``/``, ``\\`` and ``.`` are all accepted as separators::

        module_segments("Blog/Post")   -> ["Blog", "Post"]
        module_segments("Shop\\Order") -> ["Shop", "Order"]
    """
    return [seg for seg in _SEGMENT_SEPARATORS.split(name.strip()) if seg]


def class_basename(name: str) -> str:
    """Return the last segment of a namespaced module name."""
    segments = module_segments(name)
    return segments[-1] if segments else ""


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def lcfirst(value: str) -> str:
    """Lowercase the first character and leave the rest untouched."""
    return value[:1].lower() + value[1:]


def ucfirst(value: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return value[:1].upper() + value[1:]


def _ucwords(value: str) -> str:
    return re.sub(r"(^|\s)(\S)", lambda m: m.group(1) + m.group(2).upper(), value)


def studly(value: str) -> str:
    """Convert ``blog-post``, ``blog_post`` or ``blogPost`` to ``BlogPost``."""
    words = re.sub(r"[-_]", " ", value).split(" ")
    return "".join(ucfirst(word) for word in words)


def snake(value: str, delimiter: str = "_") -> str:
    """Convert ``BlogPost`` to ``blog_post`` (or ``blog-post`` with ``-``).

    Values made only of lowercase ASCII letters are returned as they are.
    """
    if re.fullmatch(r"[a-z]+", value):
        return value
    value = re.sub(r"\s+", "", _ucwords(value))
    return re.sub(r"(.)(?=[A-Z])", r"\1" + delimiter, value).lower()


# ---------------------------------------------------------------------------
# Inflection tables
# ---------------------------------------------------------------------------

UNCOUNTABLE: frozenset[str] = frozenset({
    "audio", "bison", "cattle", "chassis", "compensation", "coreopsis",
    "data", "deer", "education", "emoji", "equipment", "evidence",
    "feedback", "firmware", "fish", "furniture", "gold", "hardware",
    "information", "jedi", "kin", "knowledge", "love", "metadata", "money",
    "moose", "news", "nutrition", "offspring", "plankton", "pokemon",
    "police", "rain", "recommended", "related", "rice", "series", "sheep",
    "software", "species", "swine", "traffic", "wheat",
})

IRREGULAR: dict[str, str] = {
    "atlas": "atlases",
    "axe": "axes",
    "beef": "beefs",
    "cafe": "cafes",
    "child": "children",
    "cookie": "cookies",
    "corpus": "corpuses",
    "criterion": "criteria",
    "foot": "feet",
    "genus": "genera",
    "goose": "geese",
    "human": "humans",
    "leaf": "leaves",
    "man": "men",
    "move": "moves",
    "movie": "movies",
    "niche": "niches",
    "ox": "oxen",
    "person": "people",
    "sex": "sexes",
    "tooth": "teeth",
    "valve": "valves",
    "wave": "waves",
    "woman": "women",
    "zombie": "zombies",
}

_IRREGULAR_SINGULAR: dict[str, str] = {plural: single for single, plural in IRREGULAR.items()}

_PLURAL_RULES: list[tuple[str, str]] = [
    (r"(s)tatus$", r"\1tatuses"),
    (r"(quiz)$", r"\1zes"),
    (r"^(ox)$", r"\1en"),
    (r"([ml])ouse$", r"\1ice"),
    (r"(matr|vert|ind)(ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive|gulf)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])um$", r"\1a"),
    (r"(tax)on$", r"\1a"),
    (r"(c)riterion$", r"\1riteria"),
    (r"(p)erson$", r"\1eople"),
    (r"(m)an$", r"\1en"),
    (r"(c)hild$", r"\1hildren"),
    (r"(f)oot$", r"\1eet"),
    (r"(buffal|her|potat|tomat|volcan)o$", r"\1oes"),
    (r"(alumn|bacill|cact|foc|fung|nucle|radi|stimul|syllab|termin|vir)us$", r"\1i"),
    (r"us$", "uses"),
    (r"(alias)$", r"\1es"),
    (r"(analys|ax|cris|test|thes)is$", r"\1es"),
    (r"s$", "s"),
    (r"^$", ""),
    (r"$", "s"),
]

_SINGULAR_RULES: list[tuple[str, str]] = [
    (r"(s)tatuses$", r"\1tatus"),
    (r"^(.*)(menu)s$", r"\1\2"),
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"^(ox)en", r"\1"),
    (r"(alias)(es)*$", r"\1"),
    (r"(buffal|her|potat|tomat|volcan)oes$", r"\1o"),
    (r"(alumn|bacill|cact|foc|fung|nucle|radi|stimul|syllab|termin|viri?)i$", r"\1us"),
    (r"([ftw]ax)es$", r"\1"),
    (r"(analys|ax|cris|test|thes)es$", r"\1is"),
    (r"(shoe|slave)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"ouses$", "ouse"),
    (r"([^a])uses$", r"\1us"),
    (r"([ml])ice$", r"\1ouse"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"([lr])ves$", r"\1f"),
    (r"(tive|hive|drive|dive|olive)s$", r"\1"),
    (r"([^fo])ves$", r"\1fe"),
    (r"(analy|diagno|^ba|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses$", r"\1sis"),
    (r"(tax)a$", r"\1on"),
    (r"(c)riteria$", r"\1riterion"),
    (r"([ti])a$", r"\1um"),
    (r"(p)eople$", r"\1erson"),
    (r"(m)en$", r"\1an"),
    (r"(c)hildren$", r"\1hild"),
    (r"(f)eet$", r"\1oot"),
    (r"eaus$", "eau"),
    (r"s$", ""),
]

# Words ending like these are already singular.
_SINGULAR_UNINFLECTED = re.compile(r"(?:ss|is|(?<!men)us)$", re.IGNORECASE)


def _match_case(value: str, original: str) -> str:
    """Give *value* the same casing style as *original*."""
    if original == original.lower():
        return value.lower()
    if original == original.upper():
        return value.upper()
    if original == ucfirst(original):
        return ucfirst(value)
    return value


def _apply_rules(word: str, rules: list[tuple[str, str]]) -> str:
    for pattern, replacement in rules:
        if re.search(pattern, word, flags=re.IGNORECASE):
            return re.sub(pattern, replacement, word, count=1, flags=re.IGNORECASE)
    return word


def _lookup(word: str, table: dict[str, str]) -> str | None:
    target = table.get(word.lower())
    if target is None:
        return None
    return ucfirst(target) if word[:1].isupper() else target


def pluralize(word: str) -> str:
    """Return the plural form of an English word.

    Words that already look plural are returned unchanged, so repeated
    calls never double-pluralize::

        pluralize("post")     -> "posts"
        pluralize("posts")    -> "posts"
        pluralize("Category") -> "Categories"
    """
    if not word or word.lower() in UNCOUNTABLE:
        return word
    if word.lower() in _IRREGULAR_SINGULAR:
        return word
    irregular = _lookup(word, IRREGULAR)
    if irregular is not None:
        return _match_case(irregular, word)
    if _is_rule_plural(word):
        return word
    return _match_case(_apply_rules(word, _PLURAL_RULES), word)


def _is_rule_plural(word: str) -> bool:
    """True when *word* is what the plural rules produce for its singular.

    Covers plurals that do not end in ``s`` (``media``, ``mice``, ``cacti``).
    """
    single = singularize(word)
    if single.lower() == word.lower():
        return False
    return _apply_rules(single, _PLURAL_RULES).lower() == word.lower()


def singularize(word: str) -> str:
    """Return the singular form of an English word."""
    if not word or word.lower() in UNCOUNTABLE:
        return word
    if word.lower() in IRREGULAR:
        return word
    irregular = _lookup(word, _IRREGULAR_SINGULAR)
    if irregular is not None:
        return _match_case(irregular, word)
    if _SINGULAR_UNINFLECTED.search(word):
        return word
    return _match_case(_apply_rules(word, _SINGULAR_RULES), word)


# ---------------------------------------------------------------------------
# Derived names
# ---------------------------------------------------------------------------


class DerivedNames(BaseModel):
    """Identifiers derived from a single module name."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str
    controller: str
    table_plural: str
    route_slug: str
    model_var: str


def derive_names(name: str) -> DerivedNames:
    """Compute every conventional identifier for *name*.

    Example::

        derive_names("Blog/Post")
        # model="Post", controller="Post", table_plural="posts",
        # route_slug="posts", model_var="post"
    """
    base = class_basename(name)
    model = singularize(studly(base))
    return DerivedNames(
        model=model,
        controller=studly(base),
        table_plural=pluralize(snake(base)),
        route_slug=pluralize(snake(lcfirst(model), "-")),
        model_var=lcfirst(model),
    )
