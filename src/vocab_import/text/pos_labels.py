"""Human-readable Chinese labels for part-of-speech tags."""

from __future__ import annotations

POS_LABELS = {
    # English abbreviations
    "n.": "名词",
    "n": "名词",
    "v.": "动词",
    "v": "动词",
    "vt.": "及物动词",
    "vi.": "不及物动词",
    "adj.": "形容词",
    "adj": "形容词",
    "adv.": "副词",
    "adv": "副词",
    "prep.": "介词",
    "prep": "介词",
    "conj.": "连词",
    "conj": "连词",
    "pron.": "代词",
    "pron": "代词",
    "num.": "数词",
    "num": "数词",
    "art.": "冠词",
    "art": "冠词",
    "int.": "感叹词",
    "int": "感叹词",
    # Japanese grammar markers
    "名": "名词",
    "形动": "形容动词",
    "自五": "自动词（五段）",
    "他五": "他动词（五段）",
    "他サ": "他动词（サ变）",
    "自サ": "自动词（サ变）",
    "自一": "自动词（一段）",
    "他一": "他动词（一段）",
}


def describe_part_of_speech(tag: str | None) -> str:
    """Return the Chinese description for a part-of-speech tag.

    Args:
        tag: Tag such as ``n.`` or ``自五``; may be empty or ``None``.

    Returns:
        Description, the tag itself when unknown, or ``""`` for blank input.
    """

    if tag is None or not tag.strip():
        return ""
    return POS_LABELS.get(tag.strip(), tag)
