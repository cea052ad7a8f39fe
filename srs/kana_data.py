"""
Kana Character Data

Static symbol/transliteration pairs that seed the hiragana and katakana decks.
Order matters: item ids are derived from a character's position in its list.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KanaCharacter:
    """A single kana symbol and its romaji reading."""
    character: str
    romaji: str
    kind: str  # vowel, consonant, dakuten, handakuten, combo
    row: str


HIRAGANA: tuple[KanaCharacter, ...] = (
    KanaCharacter("あ", "a", "vowel", "a"),
    KanaCharacter("い", "i", "vowel", "a"),
    KanaCharacter("う", "u", "vowel", "a"),
    KanaCharacter("え", "e", "vowel", "a"),
    KanaCharacter("お", "o", "vowel", "a"),
    KanaCharacter("か", "ka", "consonant", "ka"),
    KanaCharacter("き", "ki", "consonant", "ka"),
    KanaCharacter("く", "ku", "consonant", "ka"),
    KanaCharacter("け", "ke", "consonant", "ka"),
    KanaCharacter("こ", "ko", "consonant", "ka"),
    KanaCharacter("さ", "sa", "consonant", "sa"),
    KanaCharacter("し", "shi", "consonant", "sa"),
    KanaCharacter("す", "su", "consonant", "sa"),
    KanaCharacter("せ", "se", "consonant", "sa"),
    KanaCharacter("そ", "so", "consonant", "sa"),
    KanaCharacter("た", "ta", "consonant", "ta"),
    KanaCharacter("ち", "chi", "consonant", "ta"),
    KanaCharacter("つ", "tsu", "consonant", "ta"),
    KanaCharacter("て", "te", "consonant", "ta"),
    KanaCharacter("と", "to", "consonant", "ta"),
    KanaCharacter("な", "na", "consonant", "na"),
    KanaCharacter("に", "ni", "consonant", "na"),
    KanaCharacter("ぬ", "nu", "consonant", "na"),
    KanaCharacter("ね", "ne", "consonant", "na"),
    KanaCharacter("の", "no", "consonant", "na"),
    KanaCharacter("は", "ha", "consonant", "ha"),
    KanaCharacter("ひ", "hi", "consonant", "ha"),
    KanaCharacter("ふ", "fu", "consonant", "ha"),
    KanaCharacter("へ", "he", "consonant", "ha"),
    KanaCharacter("ほ", "ho", "consonant", "ha"),
    KanaCharacter("ま", "ma", "consonant", "ma"),
    KanaCharacter("み", "mi", "consonant", "ma"),
    KanaCharacter("む", "mu", "consonant", "ma"),
    KanaCharacter("め", "me", "consonant", "ma"),
    KanaCharacter("も", "mo", "consonant", "ma"),
    KanaCharacter("や", "ya", "consonant", "ya"),
    KanaCharacter("ゆ", "yu", "consonant", "ya"),
    KanaCharacter("よ", "yo", "consonant", "ya"),
    KanaCharacter("ら", "ra", "consonant", "ra"),
    KanaCharacter("り", "ri", "consonant", "ra"),
    KanaCharacter("る", "ru", "consonant", "ra"),
    KanaCharacter("れ", "re", "consonant", "ra"),
    KanaCharacter("ろ", "ro", "consonant", "ra"),
    KanaCharacter("わ", "wa", "consonant", "wa"),
    KanaCharacter("を", "wo", "consonant", "wa"),
    KanaCharacter("ん", "n", "consonant", "n"),
    KanaCharacter("が", "ga", "dakuten", "ga"),
    KanaCharacter("ぎ", "gi", "dakuten", "ga"),
    KanaCharacter("ぐ", "gu", "dakuten", "ga"),
    KanaCharacter("げ", "ge", "dakuten", "ga"),
    KanaCharacter("ご", "go", "dakuten", "ga"),
    KanaCharacter("ざ", "za", "dakuten", "za"),
    KanaCharacter("じ", "ji", "dakuten", "za"),
    KanaCharacter("ず", "zu", "dakuten", "za"),
    KanaCharacter("ぜ", "ze", "dakuten", "za"),
    KanaCharacter("ぞ", "zo", "dakuten", "za"),
    KanaCharacter("だ", "da", "dakuten", "da"),
    KanaCharacter("ぢ", "ji", "dakuten", "da"),
    KanaCharacter("づ", "zu", "dakuten", "da"),
    KanaCharacter("で", "de", "dakuten", "da"),
    KanaCharacter("ど", "do", "dakuten", "da"),
    KanaCharacter("ば", "ba", "dakuten", "ba"),
    KanaCharacter("び", "bi", "dakuten", "ba"),
    KanaCharacter("ぶ", "bu", "dakuten", "ba"),
    KanaCharacter("べ", "be", "dakuten", "ba"),
    KanaCharacter("ぼ", "bo", "dakuten", "ba"),
    KanaCharacter("ぱ", "pa", "handakuten", "pa"),
    KanaCharacter("ぴ", "pi", "handakuten", "pa"),
    KanaCharacter("ぷ", "pu", "handakuten", "pa"),
    KanaCharacter("ぺ", "pe", "handakuten", "pa"),
    KanaCharacter("ぽ", "po", "handakuten", "pa"),
    KanaCharacter("きゃ", "kya", "combo", "combo"),
    KanaCharacter("きゅ", "kyu", "combo", "combo"),
    KanaCharacter("きょ", "kyo", "combo", "combo"),
    KanaCharacter("しゃ", "sha", "combo", "combo"),
    KanaCharacter("しゅ", "shu", "combo", "combo"),
    KanaCharacter("しょ", "sho", "combo", "combo"),
    KanaCharacter("ちゃ", "cha", "combo", "combo"),
    KanaCharacter("ちゅ", "chu", "combo", "combo"),
    KanaCharacter("ちょ", "cho", "combo", "combo"),
    KanaCharacter("にゃ", "nya", "combo", "combo"),
    KanaCharacter("にゅ", "nyu", "combo", "combo"),
    KanaCharacter("にょ", "nyo", "combo", "combo"),
    KanaCharacter("ひゃ", "hya", "combo", "combo"),
    KanaCharacter("ひゅ", "hyu", "combo", "combo"),
    KanaCharacter("ひょ", "hyo", "combo", "combo"),
    KanaCharacter("みゃ", "mya", "combo", "combo"),
    KanaCharacter("みゅ", "myu", "combo", "combo"),
    KanaCharacter("みょ", "myo", "combo", "combo"),
    KanaCharacter("りゃ", "rya", "combo", "combo"),
    KanaCharacter("りゅ", "ryu", "combo", "combo"),
    KanaCharacter("りょ", "ryo", "combo", "combo"),
    KanaCharacter("ぎゃ", "gya", "combo", "combo"),
    KanaCharacter("ぎゅ", "gyu", "combo", "combo"),
    KanaCharacter("ぎょ", "gyo", "combo", "combo"),
    KanaCharacter("じゃ", "ja", "combo", "combo"),
    KanaCharacter("じゅ", "ju", "combo", "combo"),
    KanaCharacter("じょ", "jo", "combo", "combo"),
    KanaCharacter("びゃ", "bya", "combo", "combo"),
    KanaCharacter("びゅ", "byu", "combo", "combo"),
    KanaCharacter("びょ", "byo", "combo", "combo"),
    KanaCharacter("ぴゃ", "pya", "combo", "combo"),
    KanaCharacter("ぴゅ", "pyu", "combo", "combo"),
    KanaCharacter("ぴょ", "pyo", "combo", "combo"),
)


KATAKANA: tuple[KanaCharacter, ...] = (
    KanaCharacter("ア", "a", "vowel", "a"),
    KanaCharacter("イ", "i", "vowel", "a"),
    KanaCharacter("ウ", "u", "vowel", "a"),
    KanaCharacter("エ", "e", "vowel", "a"),
    KanaCharacter("オ", "o", "vowel", "a"),
    KanaCharacter("カ", "ka", "consonant", "ka"),
    KanaCharacter("キ", "ki", "consonant", "ka"),
    KanaCharacter("ク", "ku", "consonant", "ka"),
    KanaCharacter("ケ", "ke", "consonant", "ka"),
    KanaCharacter("コ", "ko", "consonant", "ka"),
    KanaCharacter("サ", "sa", "consonant", "sa"),
    KanaCharacter("シ", "shi", "consonant", "sa"),
    KanaCharacter("ス", "su", "consonant", "sa"),
    KanaCharacter("セ", "se", "consonant", "sa"),
    KanaCharacter("ソ", "so", "consonant", "sa"),
    KanaCharacter("タ", "ta", "consonant", "ta"),
    KanaCharacter("チ", "chi", "consonant", "ta"),
    KanaCharacter("ツ", "tsu", "consonant", "ta"),
    KanaCharacter("テ", "te", "consonant", "ta"),
    KanaCharacter("ト", "to", "consonant", "ta"),
    KanaCharacter("ナ", "na", "consonant", "na"),
    KanaCharacter("ニ", "ni", "consonant", "na"),
    KanaCharacter("ヌ", "nu", "consonant", "na"),
    KanaCharacter("ネ", "ne", "consonant", "na"),
    KanaCharacter("ノ", "no", "consonant", "na"),
    KanaCharacter("ハ", "ha", "consonant", "ha"),
    KanaCharacter("ヒ", "hi", "consonant", "ha"),
    KanaCharacter("フ", "fu", "consonant", "ha"),
    KanaCharacter("ヘ", "he", "consonant", "ha"),
    KanaCharacter("ホ", "ho", "consonant", "ha"),
    KanaCharacter("マ", "ma", "consonant", "ma"),
    KanaCharacter("ミ", "mi", "consonant", "ma"),
    KanaCharacter("ム", "mu", "consonant", "ma"),
    KanaCharacter("メ", "me", "consonant", "ma"),
    KanaCharacter("モ", "mo", "consonant", "ma"),
    KanaCharacter("ヤ", "ya", "consonant", "ya"),
    KanaCharacter("ユ", "yu", "consonant", "ya"),
    KanaCharacter("ヨ", "yo", "consonant", "ya"),
    KanaCharacter("ラ", "ra", "consonant", "ra"),
    KanaCharacter("リ", "ri", "consonant", "ra"),
    KanaCharacter("ル", "ru", "consonant", "ra"),
    KanaCharacter("レ", "re", "consonant", "ra"),
    KanaCharacter("ロ", "ro", "consonant", "ra"),
    KanaCharacter("ワ", "wa", "consonant", "wa"),
    KanaCharacter("ヲ", "wo", "consonant", "wa"),
    KanaCharacter("ン", "n", "consonant", "n"),
    KanaCharacter("ガ", "ga", "dakuten", "ga"),
    KanaCharacter("ギ", "gi", "dakuten", "ga"),
    KanaCharacter("グ", "gu", "dakuten", "ga"),
    KanaCharacter("ゲ", "ge", "dakuten", "ga"),
    KanaCharacter("ゴ", "go", "dakuten", "ga"),
    KanaCharacter("ザ", "za", "dakuten", "za"),
    KanaCharacter("ジ", "ji", "dakuten", "za"),
    KanaCharacter("ズ", "zu", "dakuten", "za"),
    KanaCharacter("ゼ", "ze", "dakuten", "za"),
    KanaCharacter("ゾ", "zo", "dakuten", "za"),
    KanaCharacter("ダ", "da", "dakuten", "da"),
    KanaCharacter("ヂ", "ji", "dakuten", "da"),
    KanaCharacter("ヅ", "zu", "dakuten", "da"),
    KanaCharacter("デ", "de", "dakuten", "da"),
    KanaCharacter("ド", "do", "dakuten", "da"),
    KanaCharacter("バ", "ba", "dakuten", "ba"),
    KanaCharacter("ビ", "bi", "dakuten", "ba"),
    KanaCharacter("ブ", "bu", "dakuten", "ba"),
    KanaCharacter("ベ", "be", "dakuten", "ba"),
    KanaCharacter("ボ", "bo", "dakuten", "ba"),
    KanaCharacter("パ", "pa", "handakuten", "pa"),
    KanaCharacter("ピ", "pi", "handakuten", "pa"),
    KanaCharacter("プ", "pu", "handakuten", "pa"),
    KanaCharacter("ペ", "pe", "handakuten", "pa"),
    KanaCharacter("ポ", "po", "handakuten", "pa"),
    KanaCharacter("キャ", "kya", "combo", "combo"),
    KanaCharacter("キュ", "kyu", "combo", "combo"),
    KanaCharacter("キョ", "kyo", "combo", "combo"),
    KanaCharacter("シャ", "sha", "combo", "combo"),
    KanaCharacter("シュ", "shu", "combo", "combo"),
    KanaCharacter("ショ", "sho", "combo", "combo"),
    KanaCharacter("チャ", "cha", "combo", "combo"),
    KanaCharacter("チュ", "chu", "combo", "combo"),
    KanaCharacter("チョ", "cho", "combo", "combo"),
    KanaCharacter("ニャ", "nya", "combo", "combo"),
    KanaCharacter("ニュ", "nyu", "combo", "combo"),
    KanaCharacter("ニョ", "nyo", "combo", "combo"),
    KanaCharacter("ヒャ", "hya", "combo", "combo"),
    KanaCharacter("ヒュ", "hyu", "combo", "combo"),
    KanaCharacter("ヒョ", "hyo", "combo", "combo"),
    KanaCharacter("ミャ", "mya", "combo", "combo"),
    KanaCharacter("ミュ", "myu", "combo", "combo"),
    KanaCharacter("ミョ", "myo", "combo", "combo"),
    KanaCharacter("リャ", "rya", "combo", "combo"),
    KanaCharacter("リュ", "ryu", "combo", "combo"),
    KanaCharacter("リョ", "ryo", "combo", "combo"),
    KanaCharacter("ギャ", "gya", "combo", "combo"),
    KanaCharacter("ギュ", "gyu", "combo", "combo"),
    KanaCharacter("ギョ", "gyo", "combo", "combo"),
    KanaCharacter("ジャ", "ja", "combo", "combo"),
    KanaCharacter("ジュ", "ju", "combo", "combo"),
    KanaCharacter("ジョ", "jo", "combo", "combo"),
    KanaCharacter("ビャ", "bya", "combo", "combo"),
    KanaCharacter("ビュ", "byu", "combo", "combo"),
    KanaCharacter("ビョ", "byo", "combo", "combo"),
    KanaCharacter("ピャ", "pya", "combo", "combo"),
    KanaCharacter("ピュ", "pyu", "combo", "combo"),
    KanaCharacter("ピョ", "pyo", "combo", "combo"),
)
