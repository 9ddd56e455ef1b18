"""Closed set of EDICT2 part-of-speech, field and usage markings.

Codes follow http://www.edrdg.org/jmdict/edict_doc.html and are
case-sensitive: ``uK`` (usually written in kanji) and ``uk`` (usually written
in kana) are different markings.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional


class AnnotationKind(str, Enum):
    PART_OF_SPEECH = "pos"
    FIELD = "field"
    MISC = "misc"
    COMMON = "common"


_POS = AnnotationKind.PART_OF_SPEECH
_FIELD = AnnotationKind.FIELD
_MISC = AnnotationKind.MISC


class Annotation(Enum):
    # Parts of speech
    ADJ_I = ("adj-i", _POS, "adjective (keiyoushi)")
    ADJ_IX = ("adj-ix", _POS, "adjective (keiyoushi), yoi/ii class")
    ADJ_NA = ("adj-na", _POS, "adjectival nouns or quasi-adjectives (keiyodoshi)")
    ADJ_NO = ("adj-no", _POS, "nouns which may take the genitive case particle `no'")
    ADJ_PN = ("adj-pn", _POS, "pre-noun adjectival (rentaishi)")
    ADJ_T = ("adj-t", _POS, "`taru' adjective")
    ADJ_F = ("adj-f", _POS, "noun or verb acting prenominally")
    ADJ = ("adj", _POS, "former adjective classification (being removed)")
    ADJ_KARI = ("adj-kari", _POS, "`kari' adjective (archaic)")
    ADJ_KU = ("adj-ku", _POS, "`ku' adjective (archaic)")
    ADJ_SHIKU = ("adj-shiku", _POS, "`shiku' adjective (archaic)")
    ADJ_NARI = ("adj-nari", _POS, "archaic/formal form of na-adjective")
    ADV = ("adv", _POS, "adverb (fukushi)")
    ADV_N = ("adv-n", _POS, "adverbial noun")
    ADV_TO = ("adv-to", _POS, "adverb taking the `to' particle")
    AUX = ("aux", _POS, "auxiliary")
    AUX_V = ("aux-v", _POS, "auxiliary verb")
    AUX_ADJ = ("aux-adj", _POS, "auxiliary adjective")
    CONJ = ("conj", _POS, "conjunction")
    COP_DA = ("cop-da", _POS, "copula")
    CTR = ("ctr", _POS, "counter")
    EXP = ("exp", _POS, "expressions (phrases, clauses, etc.)")
    INT = ("int", _POS, "interjection (kandoushi)")
    IV = ("iv", _POS, "irregular verb")
    N = ("n", _POS, "noun (common) (futsuumeishi)")
    N_ADV = ("n-adv", _POS, "adverbial noun (fukushitekimeishi)")
    N_PREF = ("n-pref", _POS, "noun, used as a prefix")
    N_SUF = ("n-suf", _POS, "noun, used as a suffix")
    N_T = ("n-t", _POS, "noun (temporal) (jisoumeishi)")
    N_PR = ("n-pr", _POS, "proper noun")
    NUM = ("num", _POS, "numeric")
    PN = ("pn", _POS, "pronoun")
    PREF = ("pref", _POS, "prefix")
    PRT = ("prt", _POS, "particle")
    SUF = ("suf", _POS, "suffix")
    UNC = ("unc", _POS, "unclassified")
    V1 = ("v1", _POS, "Ichidan verb")
    V1_S = ("v1-s", _POS, "Ichidan verb - kureru special class")
    V2A_S = ("v2a-s", _POS, "Nidan verb with 'u' ending (archaic)")
    V4H = ("v4h", _POS, "Yodan verb with `hu/fu' ending (archaic)")
    V4R = ("v4r", _POS, "Yodan verb with `ru' ending (archaic)")
    V4K = ("v4k", _POS, "Yodan verb with `ku' ending (archaic)")
    V4S = ("v4s", _POS, "Yodan verb with `su' ending (archaic)")
    V4T = ("v4t", _POS, "Yodan verb with `tsu' ending (archaic)")
    V5 = ("v5", _POS, "Godan verb (not completely classified)")
    V5ARU = ("v5aru", _POS, "Godan verb - -aru special class")
    V5B = ("v5b", _POS, "Godan verb with `bu' ending")
    V5G = ("v5g", _POS, "Godan verb with `gu' ending")
    V5K = ("v5k", _POS, "Godan verb with `ku' ending")
    V5K_S = ("v5k-s", _POS, "Godan verb - iku/yuku special class")
    V5M = ("v5m", _POS, "Godan verb with `mu' ending")
    V5N = ("v5n", _POS, "Godan verb with `nu' ending")
    V5R = ("v5r", _POS, "Godan verb with `ru' ending")
    V5R_I = ("v5r-i", _POS, "Godan verb with `ru' ending (irregular verb)")
    V5S = ("v5s", _POS, "Godan verb with `su' ending")
    V5T = ("v5t", _POS, "Godan verb with `tsu' ending")
    V5U = ("v5u", _POS, "Godan verb with `u' ending")
    V5U_S = ("v5u-s", _POS, "Godan verb with `u' ending (special class)")
    V5URU = ("v5uru", _POS, "Godan verb - uru old class verb (old form of Eru)")
    V5Z = ("v5z", _POS, "Godan verb with `zu' ending")
    VZ = ("vz", _POS, "Ichidan verb - zuru verb (alternative form of -jiru verbs)")
    VI = ("vi", _POS, "intransitive verb")
    VK = ("vk", _POS, "kuru verb - special class")
    VN = ("vn", _POS, "irregular nu verb")
    VR = ("vr", _POS, "irregular ru verb, plain form ends with -ri")
    VS = ("vs", _POS, "noun or participle which takes the aux. verb suru")
    VS_C = ("vs-c", _POS, "su verb - precursor to the modern suru")
    VS_I = ("vs-i", _POS, "suru verb - irregular")
    VS_S = ("vs-s", _POS, "suru verb - special class")
    VT = ("vt", _POS, "transitive verb")

    # Field of application
    BUDDH = ("buddh", _FIELD, "Buddhist term")
    MA = ("mA", _FIELD, "martial arts term")
    ANAT = ("anat", _FIELD, "anatomical term")
    ASTRON = ("astron", _FIELD, "astronomy term")
    BIOL = ("biol", _FIELD, "biology term")
    BOT = ("bot", _FIELD, "botany term")
    CHEM = ("chem", _FIELD, "chemistry term")
    COMP = ("comp", _FIELD, "computer terminology")
    ECON = ("econ", _FIELD, "economics term")
    FINC = ("finc", _FIELD, "finance term")
    FOOD = ("food", _FIELD, "food term")
    GEOM = ("geom", _FIELD, "geometry term")
    GRAM = ("gram", _FIELD, "grammatical term")
    LAW = ("law", _FIELD, "law term")
    LING = ("ling", _FIELD, "linguistics terminology")
    MATH = ("math", _FIELD, "mathematics")
    MED = ("med", _FIELD, "medicine term")
    MIL = ("mil", _FIELD, "military")
    MUSIC = ("music", _FIELD, "music term")
    PHYSICS = ("physics", _FIELD, "physics terminology")
    SPORTS = ("sports", _FIELD, "sports term")
    SUMO = ("sumo", _FIELD, "sumo term")
    ZOOL = ("zool", _FIELD, "zoology term")

    # Miscellaneous markings
    X = ("x", _MISC, "rude or X-rated term")
    ABBR = ("abbr", _MISC, "abbreviation")
    ARCH = ("arch", _MISC, "archaism")
    ATEJI = ("ateji", _MISC, "ateji (phonetic) reading")
    CHN = ("chn", _MISC, "children's language")
    COL = ("col", _MISC, "colloquialism")
    DEROG = ("derog", _MISC, "derogatory term")
    EXCLUSIVELY_KANJI = ("eK", _MISC, "exclusively kanji")
    EXCLUSIVELY_KANA = ("ek", _MISC, "exclusively kana")
    FAM = ("fam", _MISC, "familiar language")
    FEM = ("fem", _MISC, "female term or language")
    GIKUN = ("gikun", _MISC, "gikun (meaning) reading")
    HON = ("hon", _MISC, "honorific or respectful (sonkeigo) language")
    HUM = ("hum", _MISC, "humble (kenjougo) language")
    IRREGULAR_KANA = ("ik", _MISC, "word containing irregular kana usage")
    IRREGULAR_KANJI = ("iK", _MISC, "word containing irregular kanji usage")
    ID = ("id", _MISC, "idiomatic expression")
    IO = ("io", _MISC, "irregular okurigana usage")
    JOC = ("joc", _MISC, "jocular, humorous term")
    M_SL = ("m-sl", _MISC, "manga slang")
    MALE = ("male", _MISC, "male term or language")
    MALE_SL = ("male-sl", _MISC, "male slang")
    OUTDATED_KANJI = ("oK", _MISC, "word containing out-dated kanji")
    OBS = ("obs", _MISC, "obsolete term")
    OBSC = ("obsc", _MISC, "obscure term")
    OUTDATED_KANA = ("ok", _MISC, "out-dated or obsolete kana usage")
    ON_MIM = ("on-mim", _MISC, "onomatopoeic or mimetic word")
    POET = ("poet", _MISC, "poetical term")
    POL = ("pol", _MISC, "polite (teineigo) language")
    PROVERB = ("proverb", _MISC, "proverb")
    RARE = ("rare", _MISC, "rare (now replaced by \"obsc\")")
    RARE_KANJI = ("rK", _MISC, "rarely-used kanji form")
    SENS = ("sens", _MISC, "sensitive word")
    SL = ("sl", _MISC, "slang")
    USUALLY_KANJI = ("uK", _MISC, "word usually written using kanji alone")
    USUALLY_KANA = ("uk", _MISC, "word usually written using kana alone")
    VULG = ("vulg", _MISC, "vulgar expression or word")
    YOJI = ("yoji", _MISC, "yojijukugo (four-character compound)")

    # Indicator for common words
    COMMON = ("P", AnnotationKind.COMMON, "commonly used word")

    def __init__(self, code: str, kind: AnnotationKind, description: str) -> None:
        self.code = code
        self.kind = kind
        self.description = description

    def __str__(self) -> str:
        return self.code


@lru_cache(maxsize=1)
def _annotations_by_code() -> Mapping[str, Annotation]:
    table = {}
    for annotation in Annotation:
        if annotation.code in table:
            raise RuntimeError(f"Duplicate annotation code: {annotation.code}")
        table[annotation.code] = annotation
    return MappingProxyType(table)


def code_of(annotation: Annotation) -> str:
    return annotation.code


def annotation_of(code: str) -> Optional[Annotation]:
    """Look up an annotation by its exact EDICT code."""

    return _annotations_by_code().get(code)


def describe(annotation: Annotation) -> str:
    return annotation.description


def all_codes() -> Mapping[str, Annotation]:
    return _annotations_by_code()
