r"""
Text-processing benchmarks: CSV parsing and Cyrillic transliteration.

    from ips_bench.benchmarks.text import text_benchmarks, transliterate

    transliterate("кирилица")  # "kirilitsa"
"""

import csv
import io

from ips_bench.benchmarks.base import BenchmarkSet

__all__ = ["text_benchmarks", "transliterate"]

CSV_ROWS = """Name,Department,Salary
Bob,Engineering,1000
Jane,Sales,2000
John,Management,5000
"""

CYRILLIC_TEXT = (
    "В исторически план кирилицата, заедно с глаголицата, е едната от двете азбуки, "
    "използвани при записването на старобългарския книжовен език. Кирилицата е създадена "
    "в Преславската книжовна школа към края на IX или началото на X век."
)

# Bulgarian streamlined system
_TO_LATIN = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ж": "zh", "з": "z",
    "и": "i", "й": "y", "к": "k", "л": "l", "м": "m", "н": "n", "о": "o", "п": "p",
    "р": "r", "с": "s", "т": "t", "у": "u", "ф": "f", "х": "h", "ц": "ts", "ч": "ch",
    "ш": "sh", "щ": "sht", "ъ": "a", "ь": "y", "ю": "yu", "я": "ya",
}

# Inverse used for Latin input; longest sequences first
_TO_CYRILLIC = {
    "sht": "щ", "zh": "ж", "ts": "ц", "ch": "ч", "sh": "ш", "yu": "ю", "ya": "я",
    "a": "а", "b": "б", "v": "в", "g": "г", "d": "д", "e": "е", "z": "з", "i": "и",
    "y": "й", "k": "к", "l": "л", "m": "м", "n": "н", "o": "о", "p": "п", "r": "р",
    "s": "с", "t": "т", "u": "у", "f": "ф", "h": "х",
}
_MAX_LATIN = max(len(k) for k in _TO_CYRILLIC)


def _match_case(source: str, target: str) -> str:
    return target.capitalize() if source.isupper() else target


def _to_latin(text: str) -> str:
    out = []
    for char in text:
        latin = _TO_LATIN.get(char.lower())
        out.append(_match_case(char, latin) if latin is not None else char)
    return "".join(out)


def _to_cyrillic(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        for size in range(_MAX_LATIN, 0, -1):
            chunk = text[i:i + size]
            cyrillic = _TO_CYRILLIC.get(chunk.lower())
            if cyrillic is not None:
                out.append(cyrillic.upper() if chunk[0].isupper() else cyrillic)
                i += size
                break
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def transliterate(text: str) -> str:
    """Convert Cyrillic text to Latin, or Latin text to Cyrillic."""
    if any("Ѐ" <= char <= "ӿ" for char in text):
        return _to_latin(text)
    return _to_cyrillic(text)


def text_benchmarks() -> BenchmarkSet:
    """Build the text-processing benchmark set."""
    suite = BenchmarkSet()

    @suite.benchmark("parse")
    def parse_csv() -> None:
        list(csv.DictReader(io.StringIO(CSV_ROWS)))

    @suite.benchmark("two-way-tweet")
    def two_way_tweet() -> None:
        transliterate(transliterate(CYRILLIC_TEXT))

    return suite
