import re
from typing import Iterable, Tuple

# English -> Urdu. Entries are applied in this order, each over the output of
# the previous ones, so the order is part of the result.
URDU_DICTIONARY: Tuple[Tuple[str, str], ...] = (
    ("the", "یہ"),
    ("and", "اور"),
    ("is", "ہے"),
    ("are", "ہیں"),
    ("was", "تھا"),
    ("were", "تھے"),
    ("in", "میں"),
    ("of", "کا"),
    ("to", "کو"),
    ("for", "کے لیے"),
    ("with", "کے ساتھ"),
    ("on", "پر"),
    ("from", "سے"),
    ("this", "یہ"),
    ("that", "وہ"),
    ("it", "یہ"),
    ("not", "نہیں"),
    ("but", "لیکن"),
    ("or", "یا"),
    ("you", "آپ"),
    ("we", "ہم"),
    ("they", "وہ"),
    ("he", "وہ"),
    ("she", "وہ"),
    ("i", "میں"),
    ("my", "میرا"),
    ("your", "آپ کا"),
    ("our", "ہمارا"),
    ("their", "ان کا"),
    ("can", "سکتا ہے"),
    ("will", "گا"),
    ("have", "ہے"),
    ("has", "ہے"),
    ("all", "تمام"),
    ("more", "مزید"),
    ("new", "نیا"),
    ("good", "اچھا"),
    ("time", "وقت"),
    ("people", "لوگ"),
    ("world", "دنیا"),
    ("life", "زندگی"),
    ("day", "دن"),
    ("year", "سال"),
    ("work", "کام"),
    ("blog", "بلاگ"),
    ("article", "مضمون"),
    ("post", "پوسٹ"),
    ("summary", "خلاصہ"),
    ("technology", "ٹیکنالوجی"),
    ("business", "کاروبار"),
    ("health", "صحت"),
    ("education", "تعلیم"),
    ("important", "اہم"),
    ("information", "معلومات"),
    ("learn", "سیکھیں"),
    ("help", "مدد"),
    ("use", "استعمال"),
    ("make", "بنائیں"),
    ("first", "پہلا"),
    ("best", "بہترین"),
)


def _whole_word(word: str):
    return re.compile(r"\b" + re.escape(word) + r"\b", re.IGNORECASE)


def translate(text: str, dictionary: Iterable[Tuple[str, str]] = URDU_DICTIONARY) -> str:
    """
    Word-for-word substitution. Every case-insensitive whole-word match of
    each key is replaced by its value; unknown words are left alone.
    """
    translated = text or ""
    for english, urdu in dictionary:
        # A callable keeps backslashes in the value literal
        translated = _whole_word(english).sub(lambda _match, value=urdu: value, translated)
    return translated
