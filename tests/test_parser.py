"""Tests for building documents: sections, keys, duplicates, options."""

from pysir import IniFlag, IniOptions, SectionRange, load_from_str


class TestSectionsAndKeys:
    def test_basic_lookup(self, basics: str) -> None:
        doc = load_from_str(basics)
        assert doc.section_names == ['global', 'section 1', 'section 2']
        assert doc.get_str('global', 'key1') == 'foo'
        assert doc.get_str('section 1', 'key2') == 'bar'
        assert doc.get_str('section 2', 'key3') == 'baz'
        assert doc.get_str(None, 'key3') == 'baz'
        assert not doc.has_error

    def test_key_arrays_stay_parallel(self, basics: str) -> None:
        doc = load_from_str(basics)
        assert doc.key_names == ('key1', 'key2', 'key3')
        assert doc.key_values == ('foo', 'bar', 'baz')
        assert len(doc.name_spans) == len(doc.value_spans) == len(doc)

    def test_defaults(self) -> None:
        ctx = object()
        doc = load_from_str('a=1', mem_ctx=ctx)
        assert doc.name == 'ini'
        assert doc.mem_ctx is ctx
        assert doc.options == IniOptions()

    def test_bytes_and_flags_are_accepted(self) -> None:
        doc = load_from_str(b'a=1\na=2', IniFlag.OVERRIDE_DUPLICATE_KEYS)
        assert doc.options.override_duplicate_keys
        assert doc.get_str(None, 'a') == '2'

    def test_global_header_reopens_the_global_section(self) -> None:
        doc = load_from_str('a=1\n[b]\nc=2\n[global]\nd=3')
        assert doc.section_names == ['global', 'b']
        assert doc.sections[0].ranges == [SectionRange(0, 1), SectionRange(2, 3)]
        assert doc.section_key_names('global') == ['a', 'd']

    def test_header_then_key_on_one_line(self) -> None:
        doc = load_from_str('[s] k = v\n')
        assert doc.get_str('s', 'k') == 'v'

    def test_bytes_that_are_not_utf8(self) -> None:
        doc = load_from_str(b'k = caf\xe9\n[s]\nx = 1\n')
        assert not doc.has_error
        value = doc.get_str(None, 'k')
        assert value.startswith('caf')
        assert len(value) == 4
        assert doc.get_str('s', 'x') == '1'

    def test_quotes_outside_values_do_not_hide_comments(self) -> None:
        doc = load_from_str('[a"b] ; note\nk = v\n')
        assert doc.get_str('a"b', 'k') == 'v'
        doc = load_from_str('k"1 = v ; note\nk2 = w\n')
        assert doc.get_str(None, 'k"1') == 'v'
        assert doc.get_str(None, 'k2') == 'w'


class TestReopenedSections:
    def test_reopened_section_gets_a_second_range(self, reopened: str) -> None:
        doc = load_from_str(reopened)
        a = doc.get_section('A')
        b = doc.get_section('B')
        assert a.ranges == [SectionRange(0, 1), SectionRange(2, 3)]
        assert b.ranges == [SectionRange(1, 2)]
        assert doc.section_key_names('A') == ['x', 'z']
        assert doc.section_key_values('A') == ['1', '3']

    def test_duplicate_policy_spans_both_ranges(self, reopened: str) -> None:
        doc = load_from_str(reopened)
        assert doc.get_str('A', 'x') == '1'
        doc = load_from_str(reopened, IniOptions(override_duplicate_keys=True))
        assert doc.get_str('A', 'x') == '9'
        assert doc.key_names == ('x', 'y', 'z')

    def test_same_section_twice_in_a_row_keeps_one_range(self) -> None:
        doc = load_from_str('[a]\nx=1\n[a]\ny=2\n')
        assert doc.get_section('a').ranges == [SectionRange(0, 2)]


class TestDuplicates:
    def test_first_occurrence_wins_by_default(self, duplicates: str) -> None:
        doc = load_from_str(duplicates)
        assert doc.get_str('global', 'key') == 'foo'
        assert doc.get_str('section1', 'key') == 'foo'
        assert doc.get_str('section2', 'key') == 'hello world'
        assert doc.get_str(None, 'key') == 'foo'

    def test_last_occurrence_wins_when_overriding(self, duplicates: str) -> None:
        doc = load_from_str(duplicates, IniOptions(override_duplicate_keys=True))
        assert doc.get_str('section1', 'key') == 'bar'
        assert doc.get_str(None, 'key') == 'hello world'
        # overriding reuses the slot of the first occurrence.
        assert doc.section_key_names('section1') == ['key']

    def test_global_search_under_override(self) -> None:
        src = 'key1 = foo\nkey1 = bar\n[another_section]\nkey1 = baz\n'
        doc = load_from_str(src, IniOptions(override_duplicate_keys=True))
        assert doc.get_str(None, 'key1') == 'baz'
        assert doc.get_str('global', 'key1') == 'bar'

    def test_duplicates_fold_case_when_insensitive(self) -> None:
        doc = load_from_str('A=1\na=2', IniOptions(disable_case_sensitivity=True))
        assert doc.key_names == ('A',)
        assert doc.get_str(None, 'a') == '1'


class TestValues:
    def test_quotes_keep_whitespace(self) -> None:
        doc = load_from_str('q = "  kept  "\nu =   kept  \n')
        assert doc.get_str(None, 'q') == '  kept  '
        assert doc.get_str(None, 'u') == 'kept'

    def test_quotes_as_literal_characters(self) -> None:
        doc = load_from_str('q = "  kept  "\n', IniOptions(disable_quotes=True))
        assert doc.get_str(None, 'q') == '"  kept  "'

    def test_quotes_keep_comment_and_assignment_characters(self) -> None:
        doc = load_from_str('q = "a;b#c=d" ; note\n')
        assert doc.get_str(None, 'q') == 'a;b#c=d'

    def test_unterminated_quote_runs_to_the_end(self) -> None:
        doc = load_from_str('a = "open\nb = 2\n')
        assert doc.key_names == ('a',)
        assert doc.get_str(None, 'a') == 'open\nb = 2\n'

    def test_empty_values(self) -> None:
        src = 'key0 =\nkey1 = x\n'
        assert load_from_str(src).get_str(None, 'key0') == ''
        doc = load_from_str(src, IniOptions(ignore_empty_values=True))
        assert doc.get_str(None, 'key0') is None
        assert doc.has_error
        assert doc.key_names == ('key1',)

    def test_empty_value_does_not_override(self) -> None:
        opts = IniOptions(ignore_empty_values=True, override_duplicate_keys=True)
        doc = load_from_str('k = a\nk =\nk = ""\n', opts)
        assert doc.get_str(None, 'k') == 'a'

    def test_crlf_line_endings(self) -> None:
        doc = load_from_str('[s]\r\nk = v\r\n')
        assert doc.get_str('s', 'k') == 'v'


class TestOptions:
    def test_hash_comments_disabled(self) -> None:
        src = 'key3 = 1\n#thisisacomment\n\n[another_section]\n\nkey4 = 2\n'
        doc = load_from_str(src, IniOptions(disable_hash_comments=True))
        assert doc.section_names == ['global']
        assert doc.get_str(
            None, '#thisisacomment\n\n[another_section]\n\nkey4') == '2'

    def test_colon_assignment_disabled(self) -> None:
        src = 'key4:colon\n\nkey5 = x\n'
        doc = load_from_str(src, IniOptions(disable_colon_assignment=True))
        assert doc.get_str(None, 'key4:colon\n\nkey5') == 'x'
        assert load_from_str(src).get_str(None, 'key4') == 'colon'

    def test_comment_anywhere_disabled(self) -> None:
        src = 'key5 = olleh#commentanywhere\n  # whole line\n'
        doc = load_from_str(src, IniOptions(disable_comment_anywhere=True))
        assert doc.get_str(None, 'key5') == 'olleh#commentanywhere'
        assert doc.key_names == ('key5',)
        assert load_from_str(src).get_str(None, 'key5') == 'olleh'

    def test_case_insensitive_names(self) -> None:
        src = 'KEY = hello\n[Sec]\nName = x\n'
        doc = load_from_str(src, IniOptions(disable_case_sensitivity=True))
        assert doc.get_str(None, 'key') == 'hello'
        assert doc.get_str('SEC', 'name') == 'x'
        # values are never folded.
        assert doc.get_str('sec', 'NAME') == 'x'

        doc = load_from_str(src)
        assert doc.get_str(None, 'key') is None
        assert doc.get_section('sec') is None


class TestTruncation:
    def test_unterminated_header_at_the_end(self) -> None:
        doc = load_from_str('a=1\n[unterminated')
        assert doc.section_names == ['global', 'unterminated']
        assert doc.get_str(None, 'a') == '1'

    def test_key_without_assignment_at_the_end(self) -> None:
        doc = load_from_str('a=1\nlonely')
        assert doc.key_names == ('a', 'lonely')
        assert doc.get_str(None, 'lonely') == ''

    def test_empty_and_blank_input(self) -> None:
        for src in ('', '   \n\t\n', '; only a comment'):
            doc = load_from_str(src)
            assert doc.section_names == ['global']
            assert len(doc) == 0


class TestLifecycle:
    def test_release_drops_tables_but_not_handed_out_lists(self) -> None:
        with load_from_str('[s]\na=1\nb=2\n') as doc:
            names = doc.section_key_names('s')
            csv = doc.get_csv('s', 'a')
        assert names == ['a', 'b']
        assert csv == ['1']
        assert doc.sections == []
        assert len(doc) == 0
        assert doc.key_names == ()

    def test_document_without_keys_is_truthy(self) -> None:
        doc = load_from_str('[only]\n[sections]\n')
        assert len(doc) == 0
        assert doc
