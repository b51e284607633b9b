import pytest

BASICS = """\
; keys before the first header are global
key1 = foo

[section 1]
key2 = bar   # trailing comment

[ section 2 ]
key3 : baz
"""

DUPLICATES = """\
key = foo

[section1]
key = foo
key = bar

[section2]
key = hello world
"""

TYPES = """\
long = 70000000
ulong = 2100000
double = 3.14
bool1 = true
bool2 = FALSE
bool3 = 1
bool4 = 0
bool5 = True
long_too_big = 99999999999999999999999
long_too_small = -99999999999999999999999
long_no_digits = abc
long_blank =
double_blank =
double_no_digits = abc
bool_blank =
bool_not_parsable = maybe
hex = 0x1F
octal = 017
partial = 12px
csv = a,b,,d
"""

REOPENED = """\
[A]
x = 1
[B]
y = 2
[A]
z = 3
x = 9
"""


@pytest.fixture
def basics() -> str:
    return BASICS


@pytest.fixture
def duplicates() -> str:
    return DUPLICATES


@pytest.fixture
def types_ini() -> str:
    return TYPES


@pytest.fixture
def reopened() -> str:
    return REOPENED
