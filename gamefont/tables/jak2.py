"""Font tables for Jak 2.

This font adds lowercase Latin letters. Kana and kanji glyphs take a 0x01
prefix byte, and the Hangul glyph parts of the Korean release take 0x03.
Replace rules assemble flag and controller pieces into icons.
"""

from __future__ import annotations

# ruff: noqa: E501

JAK2_PASSTHROUGH: frozenset[str] = frozenset("~ ,.-+()!:?=%*/#;<>@[_]")

JAK2_REPLACE_RULES: tuple[tuple[str, str], ...] = (
    ("A~Y~-21H~-5Vº~Z", "Å"),
    ("N~Y~-6Hº~Z~+10H", "Nº"),
    ("~+4Vç~-4V", ",c"),

    ("N~Y~-22H~-4V<TIL>~Z", "Ñ"),
    ("n~Y~-24H~-4V<TIL>~Z", "ñ"),
    ("A~Y~-21H~-5V<TIL>~Z", "Ã"),
    ("O~Y~-22H~-4V<TIL>~Z", "Õ"),

    ("A~Y~-21H~-5V'~Z", "Á"),
    ("A~Y~-26H~-8V'~Z", "<Á_V2>"),
    ("a~Y~-25H~-5V'~Z", "á"),
    ("E~Y~-23H~-9V'~Z", "É"),
    ("e~Y~-26H~-5V'~Z", "é"),
    ("I~Y~-19H~-5V'~Z", "Í"),
    ("i~Y~-19H~-8V'~Z", "í"),
    ("O~Y~-22H~-4V'~Z", "Ó"),
    ("o~Y~-26H~-4V'~Z", "ó"),
    ("U~Y~-24H~-3V'~Z", "Ú"),
    ("u~Y~-24H~-3V'~Z", "ú"),

    ("A~Y~-20H~-4V^~Z", "Â"),
    ("a~Y~-24H~-5V^~Z", "â"),
    ("E~Y~-20H~-5V^~Z", "Ê"),
    ("e~Y~-25H~-4V^~Zt", "ê"),
    ("I~Y~-19H~-5V^~Z", "Î"),
    ("i~Y~-19H~-8V^~Z", "î"),
    ("O~Y~-20H~-4V^~Z", "Ô"),
    ("o~Y~-25H~-4V^~Z", "ô"),
    ("U~Y~-24H~-3V^~Z", "Û"),
    ("u~Y~-23H~-3V^~Z", "û"),

    ("A~Y~-26H~-8V`~Z", "À"),
    ("a~Y~-25H~-5V`~Z", "à"),
    ("E~Y~-23H~-9V`~Z", "È"),
    ("e~Y~-26H~-5V`~Z", "è"),
    ("I~Y~-19H~-5V`~Z", "Ì"),
    ("i~Y~-19H~-8V`~Z", "ì"),
    ("O~Y~-22H~-4V`~Z", "Ò"),
    ("o~Y~-26H~-4V`~Z", "ò"),
    ("U~Y~-24H~-3V`~Z", "Ù"),
    ("u~Y~-24H~-3V`~Z", "ù"),

    ("A~Y~-26H~-8V¨~Z", "Ä"),
    ("a~Y~-25H~-5V¨~Z", "ä"),
    ("E~Y~-20H~-5V¨~Z", "Ë"),
    ("I~Y~-19H~-5V¨~Z", "Ï"),
    ("O~Y~-26H~-8V¨~Z", "Ö"),
    ("o~Y~-26H~-4V¨~Z", "ö"),
    ("U~Y~-25H~-8V¨~Z", "Ü"),
    ("u~Y~-24H~-3V¨~Z", "ü"),

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

    ("~Y~22L<~Z~Y~27L*~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_X>"),
    ("~Y~22L<~Z~Y~26L;~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_TRIANGLE>"),
    ("~Y~22L<~Z~Y~25L@~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_CIRCLE>"),
    ("~Y~22L<~Z~Y~24L#~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<PAD_SQUARE>"),
    ("~Y~22L<PAD_PART_DPAD_L>~Z~3L~+17H~-13V<PAD_PART_DPAD_U>~Z~22L~+17H~+14V<PAD_PART_DPAD_D>~Z~22L~+32H<PAD_PART_DPAD_R>~Z~+56H", "<PAD_DPAD_UP>"),
    ("~Y~22L<PAD_PART_DPAD_L>~Z~3L~+17H~-13V<PAD_PART_DPAD_U>~Z~3L~+17H~+14V<PAD_PART_DPAD_D>~Z~22L~+32H<PAD_PART_DPAD_R>~Z~+56H", "<PAD_DPAD_DOWN>"),
    ("~Y~22L<PAD_PART_DPAD_L>~Z~22L~+17H~-13V<PAD_PART_DPAD_U>~Z~22L~+17H~+14V<PAD_PART_DPAD_D>~Z~22L~+32H<PAD_PART_DPAD_R>~Z~+56H", "<PAD_DPAD_ANY>"),
    ("~Y~22L~-2H~-12V<PAD_PART_SHOULDER_TOP_LEFT><PAD_PART_SHOULDER_TOP_RIGHT>~Z~22L~-2H~+17V<PAD_PART_SHOULDER_BOTTOM_LEFT><PAD_PART_SHOULDER_BOTTOM_RIGHT>~Z~1L~+4H~+3V<PAD_PART_L1_NAME>~Z~+38H", "<PAD_L1>"),
    ("~Y~22L~-2H~-12V<PAD_PART_SHOULDER_TOP_LEFT><PAD_PART_SHOULDER_TOP_RIGHT>~Z~22L~-2H~+17V<PAD_PART_SHOULDER_BOTTOM_LEFT><PAD_PART_SHOULDER_BOTTOM_RIGHT>~Z~1L~+6H~+3V<PAD_PART_R1_NAME>~Z~+38H", "<PAD_R1>"),
    ("~Y~22L~-2H~-6V<PAD_PART_TRIGGER_TOP_LEFT><PAD_PART_TRIGGER_TOP_RIGHT>~Z~22L~-2H~+16V<PAD_PART_TRIGGER_BOTTOM_LEFT><PAD_PART_TRIGGER_BOTTOM_RIGHT>~Z~1L~+5H~-2V<PAD_PART_R2_NAME>~Z~+38H", "<PAD_R2>"),
    ("~Y~22L~-2H~-6V<PAD_PART_TRIGGER_TOP_LEFT><PAD_PART_TRIGGER_TOP_RIGHT>~Z~22L~-2H~+16V<PAD_PART_TRIGGER_BOTTOM_LEFT><PAD_PART_TRIGGER_BOTTOM_RIGHT>~Z~1L~+5H~-2V<PAD_PART_L2_NAME>~Z~+38H", "<PAD_L2>"),
    ("~1L~+8H~Y<PAD_PART_STICK>~Z~6L~-16H<PAD_PART_STICK_LEFT>~Z~+16h~6L<PAD_PART_STICK_RIGHT>~Z~6L~-15V<PAD_PART_STICK_DOWN>~Z~+13V~6L<PAD_PART_STICK_UP>~Z~-10H~+9V~6L<PAD_PART_STICK_UP_LEFT>~Z~+10H~+9V~6L<PAD_PART_STICK_UP_RIGHT>~Z~-10H~-11V~6L<PAD_PART_STICK_DOWN_LEFT>~Z~+10H~-11V~6L<PAD_PART_STICK_DOWN_RIGHT>~Z~+32H", "<PAD_ANALOG_ANY>"),
    ("~Y~1L~+8H<PAD_PART_STICK>~Z~6L~-8H<PAD_PART_STICK_LEFT>~Z~+24H~6L<PAD_PART_STICK_RIGHT>~Z~+40H", "<PAD_ANALOG_LEFT_RIGHT>"),
    ("~Y~1L<PAD_PART_STICK>~Z~6L~-15V<PAD_PART_STICK_DOWN>~Z~+13V~6L<PAD_PART_STICK_UP>~Z~+26H", "<PAD_ANALOG_UP_DOWN>"),

    ("~Y~6L<~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<ICON_MISSION_COMPLETE>"),
    ("~Y~3L<~Z~Y~1L>~Z~Y~23L[~Z~+26H", "<ICON_MISSION_TODO>"),

    ("~Y~6L<FLAG_PART_VERT_STRIPE_LARGE>~Z~+15H~1L<FLAG_PART_VERT_STRIPE_LARGE>~Z~+30H~3L<FLAG_PART_VERT_STRIPE_LARGE>~Z~+45H", "<FLAG_ITALIAN>"),
    ("~Y~5L<FLAG_PART_FILL>~Z~3L<FLAG_PART_TOP_BOTTOM_STRIPE>~]~-1H~Y~5L<FLAG_PART_FILL>~Z~3L<FLAG_PART_TOP_BOTTOM_STRIPE>~Z~+26H", "<FLAG_SPAIN>"),
    ("~Y~39L~~~Z~3L<FLAG_PART_HORZ_STRIPE_MIDDLE>~Z~5L<FLAG_PART_HORZ_STRIPE_BOTTOM>~]~-1H~Y~39L~~~Z~3L<FLAG_PART_HORZ_STRIPE_MIDDLE>~Z~5L<FLAG_PART_HORZ_STRIPE_BOTTOM>~Z~+26H", "<FLAG_GERMAN>"),
    ("~Y~7L<FLAG_PART_VERT_STRIPE_LARGE>~Z~+15H~1L<FLAG_PART_VERT_STRIPE_LARGE>~Z~+30H~3L<FLAG_PART_VERT_STRIPE_LARGE>~Z~+47H", "<FLAG_FRANCE>"),
    ("~Y~1L<FLAG_PART_FILL>~Z~3L<FLAG_PART_UK_CROSS_LEFT>~Z~7L<FLAG_PART_UK_FILL_LEFT>~]~-1H~Y~1L<FLAG_PART_FILL>~Z~3L<FLAG_PART_UK_CROSS_RIGHT>~Z~7L<FLAG_PART_UK_FILL_RIGHT>~Z~+26H", "<FLAG_UK>"),
    ("~Y~1L<FLAG_PART_FILL>~Z~3L<FLAG_PART_USA_STRIPES_LEFT>~Z~7L<FLAG_PART_USA_STARS>~]~-1H~Y~1L<FLAG_PART_FILL>~Z~3L<FLAG_PART_USA_STRIPES_RIGHT>~Z~+26H", "<FLAG_USA>"),
    ("~Y~1L<FLAG_PART_FILL>~Z~39L<FLAG_PART_KOREA_TRIGRAMS_LEFT>~]~-1H~Y~1L<FLAG_PART_FILL>~Z~39L<FLAG_PART_KOREA_TRIGRAMS_RIGHT>~Z~-11H~7L<FLAG_PART_KOREA_CIRCLE_FILL>~Z~-11H~3L<FLAG_PART_KOREA_CIRCLE_TOP>~Z~+26H", "<FLAG_KOREA>"),
    ("~Y~1L<FLAG_PART_FILL>~]~-1H~Y~1L<FLAG_PART_FILL>~Z~-11H~3L<FLAG_PART_JAPAN_SUN>~Z~+26H", "<FLAG_JAPAN>"),

    ("~+7Vp~-7V", "p"),
    ("~+7Vy~-7V", "y"),
    ("~+7Vg~-7V", "g"),
    ("~+7Vq~-7V", "q"),
    ("~+1Vj~-1V", "j"),

    ("\\\\", "~%"),

    ("~-4H~-3V<SOMETHING>~+3V~-4H", "<SUPERSCRIPT_QUOTE>"),
    ("~Y~-6Hº~Z~+10H", "°"),

    ("~[~1L", "<COLOR_WHITE>"),
    ("~[~32L", "<COLOR_DEFAULT>"),
)

JAK2_ENCODE_RULES: tuple[tuple[str, bytes], ...] = (
    ("ˇ", b"\x10"),
    ("`", b"\x11"),
    ("'", b"\x12"),
    ("^", b"\x13"),
    ("<TIL>", b"\x14"),
    ("¨", b"\x15"),
    ("º", b"\x16"),
    ("¡", b"\x17"),
    ("¿", b"\x18"),
    ("<SOMETHING>", b"\x19"),
    ("ç", b"\x1d"),
    ("Ç", b"\x1e"),
    ("ß", b"\x1f"),

    ("œ", b"\x5e"),

    ("<FLAG_PART_HORZ_STRIPE_MIDDLE>", b"\x7f"),
    ("<FLAG_PART_HORZ_STRIPE_BOTTOM>", b"\x80"),
    ("<FLAG_PART_VERT_STRIPE_LARGE>", b"\x81"),
    ("<FLAG_PART_VERT_STRIPE_RIGHT>", b"\x82"),
    ("<FLAG_PART_VERT_STRIPE_LEFT>", b"\x83"),
    ("<FLAG_PART_VERT_STRIPE_MIDDLE>", b"\x84"),
    ("<FLAG_PART_FILL>", b"\x85"),
    ("<FLAG_PART_JAPAN_SUN>", b"\x86"),
    ("<FLAG_PART_KOREA_TRIGRAMS_LEFT>", b"\x87"),
    ("<FLAG_PART_KOREA_TRIGRAMS_RIGHT>", b"\x88"),
    ("<FLAG_PART_KOREA_CIRCLE_TOP>", b"\x89"),
    ("<FLAG_PART_KOREA_CIRCLE_FILL>", b"\x8a"),
    ("<FLAG_PART_TOP_BOTTOM_STRIPE>", b"\x8b"),
    ("<FLAG_PART_UK_CROSS_LEFT>", b"\x8c"),
    ("<FLAG_PART_UK_CROSS_RIGHT>", b"\x8d"),
    ("<FLAG_PART_UK_FILL_LEFT>", b"\x8e"),
    ("<FLAG_PART_UK_FILL_RIGHT>", b"\x8f"),
    ("<FLAG_PART_USA_STRIPES_RIGHT>", b"\x90"),
    ("<PAD_PART_STICK>", b"\x91"),
    ("<PAD_PART_SELECT>", b"\x92"),
    ("<PAD_PART_TRIGGER_BACK>", b"\x93"),
    ("<PAD_PART_R1_NAME>", b"\x94"),
    ("<PAD_PART_L1_NAME>", b"\x95"),
    ("<PAD_PART_R2_NAME>", b"\x96"),
    ("<PAD_PART_L2_NAME>", b"\x97"),
    ("<PAD_PART_STICK_UP>", b"\x98"),
    ("<PAD_PART_STICK_UP_RIGHT>", b"\x99"),
    ("<FLAG_PART_USA_STRIPES_LEFT>", b"\x9a"),
    ("<FLAG_PART_USA_STARS>", b"\x9b"),
    ("<PAD_PART_STICK_DOWN>", b"\x9c"),
    ("<PAD_PART_STICK_DOWN_LEFT>", b"\x9d"),
    ("<PAD_PART_STICK_LEFT>", b"\x9e"),
    ("<PAD_PART_STICK_UP_LEFT>", b"\x9f"),
    ("<PAD_PART_DPAD_D>", b"\xa0"),
    ("<PAD_PART_DPAD_L>", b"\xa1"),
    ("<PAD_PART_DPAD_U>", b"\xa2"),
    ("<PAD_PART_DPAD_R>", b"\xa3"),
    ("<PAD_PART_STICK_RIGHT>", b"\xa4"),
    ("<PAD_PART_STICK_DOWN_RIGHT>", b"\xa5"),
    ("<PAD_PART_SHOULDER_TOP_LEFT>", b"\xa6"),
    ("<PAD_PART_SHOULDER_TOP_RIGHT>", b"\xa7"),
    ("<PAD_PART_TRIGGER_TOP_LEFT>", b"\xa8"),
    ("<PAD_PART_TRIGGER_TOP_RIGHT>", b"\xa9"),
    ("<PAD_PART_TRIGGER_SHIM1>", b"\xaa"),
    ("<PAD_PART_TRIGGER_SHIM2>", b"\xab"),
    ("<PAD_PART_SHOULDER_SHIM2>", b"\xac"),

    ("<PAD_PART_SHOULDER_BOTTOM_LEFT>", b"\xb0"),
    ("<PAD_PART_SHOULDER_BOTTOM_RIGHT>", b"\xb1"),
    ("<PAD_PART_TRIGGER_BOTTOM_LEFT>", b"\xb2"),
    ("<PAD_PART_TRIGGER_BOTTOM_RIGHT>", b"\xb3"),
    ("・", b"\x01\x10"),
    ("゛", b"\x01\x11"),
    ("゜", b"\x01\x12"),
    ("ー", b"\x01\x13"),
    ("『", b"\x01\x14"),
    ("』", b"\x01\x15"),
    ("ぁ", b"\x01\x16"),
    ("あ", b"\x01\x17"),
    ("ぃ", b"\x01\x18"),
    ("い", b"\x01\x19"),
    ("ぅ", b"\x01\x1a"),
    ("う", b"\x01\x1b"),
    ("ぇ", b"\x01\x1c"),
    ("え", b"\x01\x1d"),
    ("ぉ", b"\x01\x1e"),
    ("お", b"\x01\x1f"),
    ("か", b"\x01\x20"),
    ("き", b"\x01\x21"),
    ("く", b"\x01\x22"),
    ("け", b"\x01\x23"),
    ("こ", b"\x01\x24"),
    ("さ", b"\x01\x25"),
    ("し", b"\x01\x26"),
    ("す", b"\x01\x27"),
    ("せ", b"\x01\x28"),
    ("そ", b"\x01\x29"),
    ("た", b"\x01\x2a"),
    ("ち", b"\x01\x2b"),
    ("っ", b"\x01\x2c"),
    ("つ", b"\x01\x2d"),
    ("て", b"\x01\x2e"),
    ("と", b"\x01\x2f"),
    ("な", b"\x01\x30"),
    ("に", b"\x01\x31"),
    ("ぬ", b"\x01\x32"),
    ("ね", b"\x01\x33"),
    ("の", b"\x01\x34"),
    ("は", b"\x01\x35"),
    ("ひ", b"\x01\x36"),
    ("ふ", b"\x01\x37"),
    ("へ", b"\x01\x38"),
    ("ほ", b"\x01\x39"),
    ("ま", b"\x01\x3a"),
    ("み", b"\x01\x3b"),
    ("む", b"\x01\x3c"),
    ("め", b"\x01\x3d"),
    ("も", b"\x01\x3e"),
    ("ゃ", b"\x01\x3f"),
    ("や", b"\x01\x40"),
    ("ゅ", b"\x01\x41"),
    ("ゆ", b"\x01\x42"),
    ("ょ", b"\x01\x43"),
    ("よ", b"\x01\x44"),
    ("ら", b"\x01\x45"),
    ("り", b"\x01\x46"),
    ("る", b"\x01\x47"),
    ("れ", b"\x01\x48"),
    ("ろ", b"\x01\x49"),
    ("ゎ", b"\x01\x4a"),
    ("わ", b"\x01\x4b"),
    ("を", b"\x01\x4c"),
    ("ん", b"\x01\x4d"),
    ("ァ", b"\x01\x4e"),
    ("ア", b"\x01\x4f"),
    ("ィ", b"\x01\x50"),
    ("イ", b"\x01\x51"),
    ("ゥ", b"\x01\x52"),
    ("ウ", b"\x01\x53"),
    ("ェ", b"\x01\x54"),
    ("エ", b"\x01\x55"),
    ("ォ", b"\x01\x56"),
    ("オ", b"\x01\x57"),
    ("カ", b"\x01\x58"),
    ("キ", b"\x01\x59"),
    ("ク", b"\x01\x5a"),
    ("ケ", b"\x01\x5b"),
    ("コ", b"\x01\x5c"),
    ("サ", b"\x01\x5d"),
    ("シ", b"\x01\x5e"),
    ("ス", b"\x01\x5f"),
    ("セ", b"\x01\x60"),
    ("ソ", b"\x01\x61"),
    ("タ", b"\x01\x62"),
    ("チ", b"\x01\x63"),
    ("ッ", b"\x01\x64"),
    ("ツ", b"\x01\x65"),
    ("テ", b"\x01\x66"),
    ("ト", b"\x01\x67"),
    ("ナ", b"\x01\x68"),
    ("ニ", b"\x01\x69"),
    ("ヌ", b"\x01\x6a"),
    ("ネ", b"\x01\x6b"),
    ("ノ", b"\x01\x6c"),
    ("ハ", b"\x01\x6d"),
    ("ヒ", b"\x01\x6e"),
    ("フ", b"\x01\x6f"),
    ("ヘ", b"\x01\x70"),
    ("ホ", b"\x01\x71"),
    ("マ", b"\x01\x72"),
    ("ミ", b"\x01\x73"),
    ("ム", b"\x01\x74"),
    ("メ", b"\x01\x75"),
    ("モ", b"\x01\x76"),
    ("ャ", b"\x01\x77"),
    ("ヤ", b"\x01\x78"),
    ("ュ", b"\x01\x79"),
    ("ユ", b"\x01\x7a"),
    ("ョ", b"\x01\x7b"),
    ("ヨ", b"\x01\x7c"),
    ("ラ", b"\x01\x7d"),
    ("リ", b"\x01\x7e"),
    ("ル", b"\x01\x7f"),
    ("レ", b"\x01\x80"),
    ("ロ", b"\x01\x81"),
    ("ヮ", b"\x01\x82"),
    ("ワ", b"\x01\x83"),
    ("ヲ", b"\x01\x84"),
    ("ン", b"\x01\x85"),

    ("位", b"\x01\x8c"),
    ("遺", b"\x01\x8d"),
    ("院", b"\x01\x8e"),
    ("映", b"\x01\x8f"),
    ("衛", b"\x01\x90"),
    ("応", b"\x01\x91"),
    ("下", b"\x01\x92"),
    ("画", b"\x01\x93"),
    ("解", b"\x01\x94"),
    ("開", b"\x01\x95"),
    ("外", b"\x01\x96"),
    ("害", b"\x01\x97"),
    ("蓋", b"\x01\x98"),
    ("完", b"\x01\x99"),
    ("換", b"\x01\x9a"),
    ("監", b"\x01\x9b"),
    ("間", b"\x01\x9c"),
    ("器", b"\x01\x9d"),
    ("記", b"\x01\x9e"),
    ("逆", b"\x01\x9f"),
    ("救", b"\x01\xa0"),
    ("金", b"\x01\xa1"),
    ("空", b"\x01\xa2"),
    ("掘", b"\x01\xa3"),
    ("警", b"\x01\xa4"),
    ("迎", b"\x01\xa5"),
    ("撃", b"\x01\xa6"),
    ("建", b"\x01\xa7"),
    ("源", b"\x01\xa8"),
    ("現", b"\x01\xa9"),
    ("言", b"\x01\xaa"),
    ("限", b"\x01\xab"),
    ("個", b"\x01\xac"),
    ("庫", b"\x01\xad"),
    ("後", b"\x01\xae"),
    ("語", b"\x01\xaf"),
    ("護", b"\x01\xb0"),
    ("交", b"\x01\xb1"),
    ("功", b"\x01\xb2"),
    ("向", b"\x01\xb3"),
    ("工", b"\x01\xb4"),
    ("攻", b"\x01\xb5"),
    ("溝", b"\x01\xb6"),
    ("行", b"\x01\xb7"),
    ("鉱", b"\x01\xb8"),
    ("降", b"\x01\xb9"),
    ("合", b"\x01\xba"),
    ("告", b"\x01\xbb"),
    ("獄", b"\x01\xbc"),
    ("彩", b"\x01\xbd"),
    ("作", b"\x01\xbe"),
    ("山", b"\x01\xbf"),
    ("使", b"\x01\xc0"),
    ("始", b"\x01\xc1"),
    ("試", b"\x01\xc2"),
    ("字", b"\x01\xc3"),
    ("寺", b"\x01\xc4"),
    ("時", b"\x01\xc5"),
    ("示", b"\x01\xc6"),
    ("自", b"\x01\xc7"),
    ("式", b"\x01\xc8"),
    ("矢", b"\x01\xc9"),
    ("射", b"\x01\xca"),
    ("者", b"\x01\xcb"),
    ("守", b"\x01\xcc"),
    ("手", b"\x01\xcd"),
    ("終", b"\x01\xce"),
    ("週", b"\x01\xcf"),
    ("出", b"\x01\xd0"),
    ("所", b"\x01\xd1"),
    ("書", b"\x01\xd2"),
    ("勝", b"\x01\xd3"),
    ("章", b"\x01\xd4"),
    ("上", b"\x01\xd5"),
    ("乗", b"\x01\xd6"),
    ("場", b"\x01\xd7"),
    ("森", b"\x01\xd8"),
    ("進", b"\x01\xd9"),
    ("人", b"\x01\xda"),
    ("水", b"\x01\xdb"),
    ("数", b"\x01\xdc"),
    ("制", b"\x01\xdd"),
    ("性", b"\x01\xde"),
    ("成", b"\x01\xdf"),
    ("聖", b"\x01\xe0"),
    ("石", b"\x01\xe1"),
    ("跡", b"\x01\xe2"),
    ("先", b"\x01\xe3"),
    ("戦", b"\x01\xe4"),
    ("船", b"\x01\xe5"),
    ("選", b"\x01\xe6"),
    ("走", b"\x01\xe7"),
    ("送", b"\x01\xe8"),
    ("像", b"\x01\xe9"),
    ("造", b"\x01\xea"),
    ("続", b"\x01\xeb"),
    ("対", b"\x01\xec"),
    ("袋", b"\x01\xed"),
    ("台", b"\x01\xee"),
    ("弾", b"\x01\xef"),
    ("地", b"\x01\xf0"),
    ("中", b"\x01\xf1"),
    ("敵", b"\x01\xf2"),
    ("転", b"\x01\xf3"),
    ("電", b"\x01\xf4"),
    ("塔", b"\x01\xf5"),
    ("頭", b"\x01\xf6"),
    ("動", b"\x01\xf7"),
    ("内", b"\x01\xf8"),
    ("日", b"\x01\xf9"),
    ("入", b"\x01\xfa"),
    ("年", b"\x01\xfb"),
    ("能", b"\x01\xfc"),
    ("廃", b"\x01\xfd"),
    ("排", b"\x01\xfe"),
    ("敗", b"\x01\xff"),

    ("発", b"\x02\x10"),
    ("反", b"\x02\x11"),
    ("必", b"\x02\x12"),
    ("表", b"\x02\x13"),
    ("武", b"\x02\x14"),
    ("壁", b"\x02\x15"),
    ("墓", b"\x02\x16"),
    ("放", b"\x02\x17"),
    ("方", b"\x02\x18"),
    ("砲", b"\x02\x19"),
    ("妨", b"\x02\x1a"),
    ("北", b"\x02\x1b"),
    ("本", b"\x02\x1c"),
    ("幕", b"\x02\x1d"),
    ("無", b"\x02\x1e"),
    ("迷", b"\x02\x1f"),
    ("面", b"\x02\x20"),
    ("戻", b"\x02\x21"),
    ("紋", b"\x02\x22"),
    ("薬", b"\x02\x23"),
    ("輸", b"\x02\x24"),
    ("勇", b"\x02\x25"),
    ("友", b"\x02\x26"),
    ("遊", b"\x02\x27"),
    ("容", b"\x02\x28"),
    ("要", b"\x02\x29"),
    ("利", b"\x02\x2a"),
    ("了", b"\x02\x2b"),
    ("量", b"\x02\x2c"),
    ("力", b"\x02\x2d"),
    ("練", b"\x02\x2e"),
    ("連", b"\x02\x2f"),
    ("録", b"\x02\x30"),
    ("話", b"\x02\x31"),
    ("墟", b"\x02\x32"),
    ("脱", b"\x02\x33"),
    ("旗", b"\x02\x35"),
    ("破", b"\x02\x36"),
    ("壊", b"\x02\x37"),
    ("全", b"\x02\x38"),
    ("滅", b"\x02\x39"),
    ("機", b"\x02\x3a"),
    ("仲", b"\x02\x3b"),
    ("渓", b"\x02\x3c"),
    ("谷", b"\x02\x3d"),
    ("優", b"\x02\x3e"),
    ("探", b"\x02\x3f"),
    ("部", b"\x02\x40"),
    ("索", b"\x02\x41"),
    ("前", b"\x02\x43"),
    ("右", b"\x02\x44"),
    ("左", b"\x02\x45"),
    ("会", b"\x02\x46"),
    ("高", b"\x02\x47"),
    ("低", b"\x02\x48"),
    ("押", b"\x02\x49"),
    ("切", b"\x02\x4a"),
    ("替", b"\x02\x4b"),
    ("秒", b"\x02\x4d"),
    ("箱", b"\x02\x4e"),
    ("泳", b"\x02\x4f"),
    ("～", b"\x02\x50"),

    ("闇", b"\x02\x56"),
    ("以", b"\x02\x57"),
    ("屋", b"\x02\x58"),
    ("俺", b"\x02\x59"),
    ("化", b"\x02\x5a"),
    ("界", b"\x02\x5b"),
    ("感", b"\x02\x5c"),
    ("気", b"\x02\x5d"),
    ("却", b"\x02\x5e"),
    ("曲", b"\x02\x5f"),
    ("継", b"\x02\x60"),
    ("権", b"\x02\x61"),
    ("見", b"\x02\x62"),
    ("古", b"\x02\x63"),
    ("好", b"\x02\x64"),
    ("才", b"\x02\x66"),
    ("士", b"\x02\x67"),
    ("子", b"\x02\x68"),
    ("次", b"\x02\x69"),
    ("主", b"\x02\x6a"),
    ("種", b"\x02\x6b"),
    ("讐", b"\x02\x6c"),
    ("女", b"\x02\x6d"),
    ("小", b"\x02\x6e"),
    ("焼", b"\x02\x6f"),
    ("証", b"\x02\x70"),
    ("神", b"\x02\x71"),
    ("身", b"\x02\x72"),
    ("寸", b"\x02\x73"),
    ("世", b"\x02\x74"),
    ("想", b"\x02\x75"),
    ("退", b"\x02\x76"),
    ("第", b"\x02\x77"),
    ("着", b"\x02\x78"),
    ("天", b"\x02\x79"),
    ("倒", b"\x02\x7a"),
    ("到", b"\x02\x7b"),
    ("突", b"\x02\x7c"),
    ("爆", b"\x02\x7d"),
    ("番", b"\x02\x7e"),
    ("負", b"\x02\x7f"),
    ("復", b"\x02\x80"),
    ("物", b"\x02\x81"),
    ("眠", b"\x02\x82"),
    ("予", b"\x02\x83"),
    ("用", b"\x02\x84"),
    ("落", b"\x02\x85"),
    ("緑", b"\x02\x86"),

    ("封", b"\x02\x88"),
    ("印", b"\x02\x89"),
    ("扉", b"\x02\x8a"),
    ("最", b"\x02\x8b"),
    ("刻", b"\x02\x8c"),
    ("足", b"\x02\x8d"),

    ("<H186>", b"\x01\x86"),
    ("<H187>", b"\x01\x87"),
    ("<H188>", b"\x01\x88"),
    ("<H189>", b"\x01\x89"),
    ("<H18a>", b"\x01\x8a"),
    ("<H306>", b"\x03\x06"),
    ("<H307>", b"\x03\x07"),
    ("<H308>", b"\x03\x08"),
    ("<H309>", b"\x03\x09"),
    ("<H30a>", b"\x03\x0a"),
    ("<H30b>", b"\x03\x0b"),
    ("<H30c>", b"\x03\x0c"),
    ("<H30d>", b"\x03\x0d"),
    ("<H30e>", b"\x03\x0e"),
    ("<H30f>", b"\x03\x0f"),
    ("<H310>", b"\x03\x10"),
    ("<H311>", b"\x03\x11"),
    ("<H312>", b"\x03\x12"),
    ("<H313>", b"\x03\x13"),
    ("<H314>", b"\x03\x14"),
    ("<H315>", b"\x03\x15"),
    ("<H316>", b"\x03\x16"),
    ("<H317>", b"\x03\x17"),
    ("<H318>", b"\x03\x18"),
    ("<H319>", b"\x03\x19"),
    ("<H31a>", b"\x03\x1a"),
    ("<H31b>", b"\x03\x1b"),
    ("<H31c>", b"\x03\x1c"),
    ("<H31d>", b"\x03\x1d"),
    ("<H31e>", b"\x03\x1e"),
    ("<H31f>", b"\x03\x1f"),
    ("<H320>", b"\x03\x20"),
    ("<H321>", b"\x03\x21"),
    ("<H322>", b"\x03\x22"),
    ("<H323>", b"\x03\x23"),
    ("<H324>", b"\x03\x24"),
    ("<H325>", b"\x03\x25"),
    ("<H326>", b"\x03\x26"),
    ("<H327>", b"\x03\x27"),
    ("<H328>", b"\x03\x28"),
    ("<H329>", b"\x03\x29"),
    ("<H32a>", b"\x03\x2a"),
    ("<H32b>", b"\x03\x2b"),
    ("<H32c>", b"\x03\x2c"),
    ("<H32d>", b"\x03\x2d"),
    ("<H32e>", b"\x03\x2e"),
    ("<H32f>", b"\x03\x2f"),
    ("<H330>", b"\x03\x30"),
    ("<H331>", b"\x03\x31"),
    ("<H332>", b"\x03\x32"),
    ("<H333>", b"\x03\x33"),
    ("<H334>", b"\x03\x34"),
    ("<H335>", b"\x03\x35"),
    ("<H336>", b"\x03\x36"),
    ("<H337>", b"\x03\x37"),
    ("<H338>", b"\x03\x38"),
    ("<H339>", b"\x03\x39"),
    ("<H33a>", b"\x03\x3a"),
    ("<H33b>", b"\x03\x3b"),
    ("<H33c>", b"\x03\x3c"),
    ("<H33d>", b"\x03\x3d"),
    ("<H33e>", b"\x03\x3e"),
    ("<H33f>", b"\x03\x3f"),
    ("<H340>", b"\x03\x40"),
    ("<H341>", b"\x03\x41"),
    ("<H342>", b"\x03\x42"),
    ("<H343>", b"\x03\x43"),
    ("<H344>", b"\x03\x44"),
    ("<H345>", b"\x03\x45"),
    ("<H346>", b"\x03\x46"),
    ("<H347>", b"\x03\x47"),
    ("<H348>", b"\x03\x48"),
    ("<H349>", b"\x03\x49"),
    ("<H34a>", b"\x03\x4a"),
    ("<H34b>", b"\x03\x4b"),
    ("<H34c>", b"\x03\x4c"),
    ("<H34d>", b"\x03\x4d"),
    ("<H34e>", b"\x03\x4e"),
    ("<H34f>", b"\x03\x4f"),
    ("<H350>", b"\x03\x50"),
    ("<H351>", b"\x03\x51"),
    ("<H352>", b"\x03\x52"),
    ("<H353>", b"\x03\x53"),
    ("<H354>", b"\x03\x54"),
    ("<H355>", b"\x03\x55"),
    ("<H356>", b"\x03\x56"),
    ("<H357>", b"\x03\x57"),
    ("<H358>", b"\x03\x58"),
    ("<H359>", b"\x03\x59"),
    ("<H35a>", b"\x03\x5a"),
    ("<H35b>", b"\x03\x5b"),
    ("<H35c>", b"\x03\x5c"),
    ("<H35d>", b"\x03\x5d"),
    ("<H35e>", b"\x03\x5e"),
    ("<H35f>", b"\x03\x5f"),
    ("<H360>", b"\x03\x60"),
    ("<H361>", b"\x03\x61"),
    ("<H362>", b"\x03\x62"),
    ("<H363>", b"\x03\x63"),
    ("<H364>", b"\x03\x64"),
    ("<H365>", b"\x03\x65"),
    ("<H366>", b"\x03\x66"),
    ("<H367>", b"\x03\x67"),
    ("<H368>", b"\x03\x68"),
    ("<H369>", b"\x03\x69"),
    ("<H36a>", b"\x03\x6a"),
    ("<H36b>", b"\x03\x6b"),
    ("<H36c>", b"\x03\x6c"),
    ("<H36d>", b"\x03\x6d"),
    ("<H36e>", b"\x03\x6e"),
    ("<H36f>", b"\x03\x6f"),
    ("<H370>", b"\x03\x70"),
    ("<H371>", b"\x03\x71"),
    ("<H372>", b"\x03\x72"),
    ("<H373>", b"\x03\x73"),
    ("<H374>", b"\x03\x74"),
    ("<H375>", b"\x03\x75"),
    ("<H376>", b"\x03\x76"),
    ("<H377>", b"\x03\x77"),
    ("<H378>", b"\x03\x78"),
    ("<H379>", b"\x03\x79"),
    ("<H37a>", b"\x03\x7a"),
    ("<H37b>", b"\x03\x7b"),
    ("<H37c>", b"\x03\x7c"),
    ("<H37d>", b"\x03\x7d"),
    ("<H37e>", b"\x03\x7e"),
    ("<H37f>", b"\x03\x7f"),
    ("<H380>", b"\x03\x80"),
    ("<H381>", b"\x03\x81"),
    ("<H382>", b"\x03\x82"),
    ("<H383>", b"\x03\x83"),
    ("<H384>", b"\x03\x84"),
    ("<H385>", b"\x03\x85"),
    ("<H386>", b"\x03\x86"),
    ("<H387>", b"\x03\x87"),
    ("<H388>", b"\x03\x88"),
    ("<H389>", b"\x03\x89"),
    ("<H38a>", b"\x03\x8a"),
    ("<H38b>", b"\x03\x8b"),
    ("<H38c>", b"\x03\x8c"),
    ("<H38d>", b"\x03\x8d"),
    ("<H38e>", b"\x03\x8e"),
    ("<H38f>", b"\x03\x8f"),
    ("<H390>", b"\x03\x90"),
    ("<H391>", b"\x03\x91"),
    ("<H392>", b"\x03\x92"),
    ("<H393>", b"\x03\x93"),
    ("<H394>", b"\x03\x94"),
    ("<H395>", b"\x03\x95"),
    ("<H396>", b"\x03\x96"),
    ("<H397>", b"\x03\x97"),
    ("<H398>", b"\x03\x98"),
    ("<H399>", b"\x03\x99"),
    ("<H39a>", b"\x03\x9a"),
    ("<H39b>", b"\x03\x9b"),
    ("<H39c>", b"\x03\x9c"),
    ("<H39d>", b"\x03\x9d"),
    ("<H39e>", b"\x03\x9e"),
    ("<H39f>", b"\x03\x9f"),
    ("<H3a0>", b"\x03\xa0"),
    ("<H3a1>", b"\x03\xa1"),
    ("<H3a2>", b"\x03\xa2"),
    ("<H3a3>", b"\x03\xa3"),
    ("<H3a4>", b"\x03\xa4"),
    ("<H3a5>", b"\x03\xa5"),
    ("<H3a6>", b"\x03\xa6"),
    ("<H3a7>", b"\x03\xa7"),
    ("<H3a8>", b"\x03\xa8"),
    ("<H3a9>", b"\x03\xa9"),
    ("<H3aa>", b"\x03\xaa"),
    ("<H3ab>", b"\x03\xab"),
    ("<H3ac>", b"\x03\xac"),
    ("<H3ad>", b"\x03\xad"),
    ("<H3ae>", b"\x03\xae"),
    ("<H3af>", b"\x03\xaf"),
    ("<H3b0>", b"\x03\xb0"),
    ("<H3b1>", b"\x03\xb1"),
    ("<H3b2>", b"\x03\xb2"),
    ("<H3b3>", b"\x03\xb3"),
    ("<H3b4>", b"\x03\xb4"),
    ("<H3b5>", b"\x03\xb5"),
    ("<H3b6>", b"\x03\xb6"),
    ("<H3b7>", b"\x03\xb7"),
    ("<H3b8>", b"\x03\xb8"),
    ("<H3b9>", b"\x03\xb9"),
    ("<H3ba>", b"\x03\xba"),
    ("<H3bb>", b"\x03\xbb"),
    ("<H3bc>", b"\x03\xbc"),
    ("<H3bd>", b"\x03\xbd"),
    ("<H3be>", b"\x03\xbe"),
    ("<H3bf>", b"\x03\xbf"),
    ("<H3c0>", b"\x03\xc0"),
    ("<H3c1>", b"\x03\xc1"),
    ("<H3c2>", b"\x03\xc2"),
    ("<H3c3>", b"\x03\xc3"),
    ("<H3c4>", b"\x03\xc4"),
    ("<H3c5>", b"\x03\xc5"),
    ("<H3c6>", b"\x03\xc6"),
    ("<H3c7>", b"\x03\xc7"),
    ("<H3c8>", b"\x03\xc8"),
    ("<H3c9>", b"\x03\xc9"),
    ("<H3ca>", b"\x03\xca"),
    ("<H3cb>", b"\x03\xcb"),
    ("<H3cc>", b"\x03\xcc"),
    ("<H3cd>", b"\x03\xcd"),
    ("<H3ce>", b"\x03\xce"),
    ("<H3cf>", b"\x03\xcf"),
    ("<H3d0>", b"\x03\xd0"),
    ("<H3d1>", b"\x03\xd1"),
    ("<H3d2>", b"\x03\xd2"),
    ("<H3d3>", b"\x03\xd3"),
    ("<H3d4>", b"\x03\xd4"),
    ("<H3d5>", b"\x03\xd5"),
    ("<H3d6>", b"\x03\xd6"),
    ("<H3d7>", b"\x03\xd7"),
    ("<H3d8>", b"\x03\xd8"),
    ("<H3d9>", b"\x03\xd9"),
    ("<H3da>", b"\x03\xda"),
    ("<H3db>", b"\x03\xdb"),
    ("<H3dc>", b"\x03\xdc"),
    ("<H3dd>", b"\x03\xdd"),
    ("<H3de>", b"\x03\xde"),
    ("<H3df>", b"\x03\xdf"),
    ("<H3e0>", b"\x03\xe0"),
    ("<H3e1>", b"\x03\xe1"),
    ("<H3e2>", b"\x03\xe2"),
    ("<H3e3>", b"\x03\xe3"),
    ("<H3e4>", b"\x03\xe4"),
    ("<H3e5>", b"\x03\xe5"),
    ("<H3e6>", b"\x03\xe6"),
    ("<H3e7>", b"\x03\xe7"),
    ("<H3e8>", b"\x03\xe8"),
    ("<H3e9>", b"\x03\xe9"),
    ("<H3ea>", b"\x03\xea"),
    ("<H3eb>", b"\x03\xeb"),
    ("<H3ec>", b"\x03\xec"),
    ("<H3ed>", b"\x03\xed"),
    ("<H3ee>", b"\x03\xee"),
    ("<H3ef>", b"\x03\xef"),
    ("<H3f0>", b"\x03\xf0"),
    ("<H3f1>", b"\x03\xf1"),
    ("<H3f2>", b"\x03\xf2"),
    ("<H3f3>", b"\x03\xf3"),
    ("<H3f4>", b"\x03\xf4"),
    ("<H3f5>", b"\x03\xf5"),
    ("<H3f6>", b"\x03\xf6"),
    ("<H3f7>", b"\x03\xf7"),
    ("<H3f8>", b"\x03\xf8"),
    ("<H3f9>", b"\x03\xf9"),
    ("<H3fa>", b"\x03\xfa"),
    ("<H3fb>", b"\x03\xfb"),
    ("<H3fc>", b"\x03\xfc"),
    ("<H3fd>", b"\x03\xfd"),
    ("<H3fe>", b"\x03\xfe"),
    ("<H3ff>", b"\x03\xff"),
)
