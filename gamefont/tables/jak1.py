"""Font tables for Jak 1 (original black label release).

Encode rules map display text to the glyph bytes of the game's large font.
Replace rules fold the positioning commands the game uses to draw accented
letters and controller buttons into single display symbols.
The replace table is shared by both Jak 1 font versions.
"""

from __future__ import annotations

# ruff: noqa: E501

JAK1_PASSTHROUGH: frozenset[str] = frozenset("~ ,.-+()!:?=%*/#;<>@[_")

JAK1_ENCODE_RULES: tuple[tuple[str, bytes], ...] = (
    ("ˇ", b"\x10"),
    ("`", b"\x11"),
    ("'", b"\x12"),
    ("^", b"\x13"),
    ("<TIL>", b"\x14"),
    ("¨", b"\x15"),
    ("º", b"\x16"),
    ("¡", b"\x17"),
    ("¿", b"\x18"),

    ("海", b"\x1a"),
    ("Æ", b"\x1b"),
    ("界", b"\x1c"),
    ("Ç", b"\x1d"),
    ("学", b"\x1e"),
    ("ß", b"\x1f"),

    ("ワ", b"\x24"),

    ("ヲ", b"\x26"),
    ("ン", b"\x27"),

    ("岩", b"\x5c"),
    ("旧", b"\x5d"),
    ("空", b"\x5e"),

    ("ヮ", b"\x60"),
    ("撃", b"\x61"),
    ("賢", b"\x62"),
    ("湖", b"\x63"),
    ("口", b"\x64"),
    ("行", b"\x65"),
    ("合", b"\x66"),
    ("士", b"\x67"),
    ("寺", b"\x68"),
    ("山", b"\x69"),
    ("者", b"\x6a"),
    ("所", b"\x6b"),
    ("書", b"\x6c"),
    ("小", b"\x6d"),
    ("沼", b"\x6e"),
    ("上", b"\x6f"),
    ("城", b"\x70"),
    ("場", b"\x71"),
    ("出", b"\x72"),
    ("闇", b"\x73"),
    ("遺", b"\x74"),
    ("黄", b"\x75"),
    ("屋", b"\x76"),
    ("下", b"\x77"),
    ("家", b"\x78"),
    ("火", b"\x79"),
    ("花", b"\x7a"),
    ("レ", b"\x7b"),
    ("Œ", b"\x7c"),
    ("ロ", b"\x7d"),

    ("青", b"\x7f"),

    ("・", b"\x90"),
    ("゛", b"\x91"),
    ("゜", b"\x92"),
    ("ー", b"\x93"),
    ("『", b"\x94"),
    ("』", b"\x95"),
    ("ぁ", b"\x96"),
    ("あ", b"\x97"),
    ("ぃ", b"\x98"),
    ("い", b"\x99"),
    ("ぅ", b"\x9a"),
    ("う", b"\x9b"),
    ("ぇ", b"\x9c"),
    ("え", b"\x9d"),
    ("ぉ", b"\x9e"),
    ("お", b"\x9f"),
    ("か", b"\xa0"),
    ("き", b"\xa1"),
    ("く", b"\xa2"),
    ("け", b"\xa3"),
    ("こ", b"\xa4"),
    ("さ", b"\xa5"),
    ("し", b"\xa6"),
    ("す", b"\xa7"),
    ("せ", b"\xa8"),
    ("そ", b"\xa9"),
    ("た", b"\xaa"),
    ("ち", b"\xab"),
    ("っ", b"\xac"),
    ("つ", b"\xad"),
    ("て", b"\xae"),
    ("と", b"\xaf"),
    ("な", b"\xb0"),
    ("に", b"\xb1"),
    ("ぬ", b"\xb2"),
    ("ね", b"\xb3"),
    ("の", b"\xb4"),
    ("は", b"\xb5"),
    ("ひ", b"\xb6"),
    ("ふ", b"\xb7"),
    ("へ", b"\xb8"),
    ("ほ", b"\xb9"),
    ("ま", b"\xba"),
    ("み", b"\xbb"),
    ("む", b"\xbc"),
    ("め", b"\xbd"),
    ("も", b"\xbe"),
    ("ゃ", b"\xbf"),
    ("や", b"\xc0"),
    ("ゅ", b"\xc1"),
    ("ゆ", b"\xc2"),
    ("ょ", b"\xc3"),
    ("よ", b"\xc4"),
    ("ら", b"\xc5"),
    ("り", b"\xc6"),
    ("る", b"\xc7"),
    ("れ", b"\xc8"),
    ("ろ", b"\xc9"),
    ("ゎ", b"\xca"),
    ("わ", b"\xcb"),
    ("を", b"\xcc"),
    ("ん", b"\xcd"),
    ("ァ", b"\xce"),
    ("ア", b"\xcf"),
    ("ィ", b"\xd0"),
    ("イ", b"\xd1"),
    ("ゥ", b"\xd2"),
    ("ウ", b"\xd3"),
    ("ェ", b"\xd4"),
    ("エ", b"\xd5"),
    ("ォ", b"\xd6"),
    ("オ", b"\xd7"),
    ("カ", b"\xd8"),
    ("キ", b"\xd9"),
    ("ク", b"\xda"),
    ("ケ", b"\xdb"),
    ("コ", b"\xdc"),
    ("サ", b"\xdd"),
    ("シ", b"\xde"),
    ("ス", b"\xdf"),
    ("セ", b"\xe0"),
    ("ソ", b"\xe1"),
    ("タ", b"\xe2"),
    ("チ", b"\xe3"),
    ("ッ", b"\xe4"),
    ("ツ", b"\xe5"),
    ("テ", b"\xe6"),
    ("ト", b"\xe7"),
    ("ナ", b"\xe8"),
    ("ニ", b"\xe9"),
    ("ヌ", b"\xea"),
    ("ネ", b"\xeb"),
    ("ノ", b"\xec"),
    ("ハ", b"\xed"),
    ("ヒ", b"\xee"),
    ("フ", b"\xef"),
    ("ヘ", b"\xf0"),
    ("ホ", b"\xf1"),
    ("マ", b"\xf2"),
    ("ミ", b"\xf3"),
    ("ム", b"\xf4"),
    ("メ", b"\xf5"),
    ("モ", b"\xf6"),
    ("ャ", b"\xf7"),
    ("ヤ", b"\xf8"),
    ("ュ", b"\xf9"),
    ("ユ", b"\xfa"),
    ("ョ", b"\xfb"),
    ("ヨ", b"\xfc"),
    ("ラ", b"\xfd"),
    ("リ", b"\xfe"),
    ("ル", b"\xff"),
    ("宝", b"\x01\x01"),

    ("石", b"\x01\x10"),
    ("赤", b"\x01\x11"),
    ("跡", b"\x01\x12"),
    ("川", b"\x01\x13"),
    ("戦", b"\x01\x14"),
    ("村", b"\x01\x15"),
    ("隊", b"\x01\x16"),
    ("台", b"\x01\x17"),
    ("長", b"\x01\x18"),
    ("鳥", b"\x01\x19"),
    ("艇", b"\x01\x1a"),
    ("洞", b"\x01\x1b"),
    ("道", b"\x01\x1c"),
    ("発", b"\x01\x1d"),
    ("飛", b"\x01\x1e"),
    ("噴", b"\x01\x1f"),

    ("池", b"\x01\xa0"),
    ("中", b"\x01\xa1"),
    ("塔", b"\x01\xa2"),
    ("島", b"\x01\xa3"),
    ("部", b"\x01\xa4"),
    ("砲", b"\x01\xa5"),
    ("産", b"\x01\xa6"),
    ("眷", b"\x01\xa7"),
    ("力", b"\x01\xa8"),
    ("緑", b"\x01\xa9"),
    ("岸", b"\x01\xaa"),
    ("像", b"\x01\xab"),
    ("谷", b"\x01\xac"),
    ("心", b"\x01\xad"),
    ("森", b"\x01\xae"),
    ("水", b"\x01\xaf"),
    ("船", b"\x01\xb0"),
    ("™", b"\x01\xb1"),
)

JAK1_REPLACE_RULES: tuple[tuple[str, str], ...] = (
    ("A~Y~-21H~-5Vº~Z", "Å"),
    ("N~Y~-6Hº~Z~+10H", "Nº"),
    ("O~Y~-16H~-1V/~Z", "Ø"),
    ("A~Y~-6H~+3V,~Z", "Ą"),
    ("E~Y~-6H~+2V,~Z", "Ę"),
    ("L~Y~-16H~+0V/~Z", "Ł"),
    ("Z~Y~-21H~-5Vº~Z", "Ż"),

    ("N~Y~-22H~-4V<TIL>~Z", "Ñ"),
    ("A~Y~-21H~-5V<TIL>~Z", "Ã"),
    ("O~Y~-22H~-4V<TIL>~Z", "Õ"),

    ("A~Y~-21H~-5V'~Z", "Á"),
    ("E~Y~-22H~-5V'~Z", "É"),
    ("I~Y~-19H~-5V'~Z", "Í"),
    ("O~Y~-22H~-4V'~Z", "Ó"),
    ("U~Y~-24H~-3V'~Z", "Ú"),
    ("C~Y~-21H~-5V'~Z", "Ć"),
    ("N~Y~-21H~-5V'~Z", "Ń"),
    ("S~Y~-21H~-5V'~Z", "Ś"),
    ("Z~Y~-21H~-5V'~Z", "Ź"),

    ("O~Y~-28H~-4V'~-9H'~Z", "Ő"),
    ("U~Y~-27H~-4V'~-12H'~Z", "Ű"),

    ("A~Y~-20H~-4V^~Z", "Â"),
    ("E~Y~-20H~-5V^~Z", "Ê"),
    ("I~Y~-19H~-5V^~Z", "Î"),
    ("O~Y~-20H~-4V^~Z", "Ô"),
    ("U~Y~-24H~-3V^~Z", "Û"),

    ("A~Y~-21H~-5V`~Z", "À"),
    ("E~Y~-22H~-5V`~Z", "È"),
    ("I~Y~-19H~-5V`~Z", "Ì"),
    ("O~Y~-22H~-4V`~Z", "Ò"),
    ("U~Y~-24H~-3V`~Z", "Ù"),

    ("A~Y~-21H~-5V¨~Z", "Ä"),
    ("E~Y~-20H~-5V¨~Z", "Ë"),
    ("I~Y~-19H~-5V¨~Z", "Ï"),
    ("O~Y~-22H~-4V¨~Z", "Ö"),
    ("O~Y~-22H~-3V¨~Z", "ö"),
    ("U~Y~-22H~-3V¨~Z", "Ü"),

    ("~Yウ~Z゛", "ヴ"),
    ("~Yカ~Z゛", "ガ"),
    ("~Yキ~Z゛", "ギ"),
    ("~Yク~Z゛", "グ"),
    ("~Yケ~Z゛", "ゲ"),
    ("~Yコ~Z゛", "ゴ"),
    ("~Yサ~Z゛", "ザ"),
    ("~Yシ~Z゛", "ジ"),
    ("~Yス~Z゛", "ズ"),
    ("~Yセ~Z゛", "ゼ"),
    ("~Yソ~Z゛", "ゾ"),
    ("~Yタ~Z゛", "ダ"),
    ("~Yチ~Z゛", "ヂ"),
    ("~Yツ~Z゛", "ヅ"),
    ("~Yテ~Z゛", "デ"),
    ("~Yト~Z゛", "ド"),
    ("~Yハ~Z゛", "バ"),
    ("~Yヒ~Z゛", "ビ"),
    ("~Yフ~Z゛", "ブ"),
    ("~Yヘ~Z゛", "ベ"),
    ("~Yホ~Z゛", "ボ"),
    ("~Yハ~Z゜", "パ"),
    ("~Yヒ~Z゜", "ピ"),
    ("~Yフ~Z゜", "プ"),
    ("~Yヘ~Z゜", "ペ"),
    ("~Yホ~Z゜", "ポ"),
    ("~Yか~Z゛", "が"),
    ("~Yき~Z゛", "ぎ"),
    ("~Yく~Z゛", "ぐ"),
    ("~Yけ~Z゛", "げ"),
    ("~Yこ~Z゛", "ご"),
    ("~Yさ~Z゛", "ざ"),
    ("~Yし~Z゛", "じ"),
    ("~Yす~Z゛", "ず"),
    ("~Yせ~Z゛", "ぜ"),
    ("~Yそ~Z゛", "ぞ"),
    ("~Yた~Z゛", "だ"),
    ("~Yち~Z゛", "ぢ"),
    ("~Yつ~Z゛", "づ"),
    ("~Yて~Z゛", "で"),
    ("~Yと~Z゛", "ど"),
    ("~Yは~Z゛", "ば"),
    ("~Yひ~Z゛", "び"),
    ("~Yふ~Z゛", "ぶ"),
    ("~Yへ~Z゛", "べ"),
    ("~Yほ~Z゛", "ぼ"),
    ("~Yは~Z゜", "ぱ"),
    ("~Yひ~Z゜", "ぴ"),
    ("~Yふ~Z゜", "ぷ"),
    ("~Yへ~Z゜", "ぺ"),
    ("~Yほ~Z゜", "ぽ"),
    (",~+8H", "、"),
    ("~+8H ", "　"),

    ("~~", "世"),

    ("~Y~22L<~Z~Y~27L*~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_X>"),
    ("~Y~22L<~Z~Y~26L;~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_TRIANGLE>"),
    ("~Y~22L<~Z~Y~25L@~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_CIRCLE>"),
    ("~Y~22L<~Z~Y~24L#~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_SQUARE>"),
)
