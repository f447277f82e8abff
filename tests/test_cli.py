"""Tests for the strkit command-line interface."""

import io

import pytest

from strkit.cli import format_result, main, operation_name


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out.rstrip('\n'), captured.err


class TestMain:
    def test_slugify(self, capsys):
        assert run(capsys, 'slugify', ' This is a tesT ') == (0, 'this-is-a-test', '')

    def test_slugify_delimiter_option(self, capsys):
        code, out, _ = run(capsys, 'slugify', ' This is a tesT ', '--delimiter', ':')
        assert (code, out) == (0, 'this:is:a:test')

    def test_slugify_delimiter_from_config(self, capsys, tmp_path):
        path = tmp_path / 'strkit.yaml'
        path.write_text('slugify:\n  delimiter: "_"\n', encoding='utf-8')
        code, out, _ = run(capsys, 'slugify', 'a b c', '--config', str(path))
        assert (code, out) == (0, 'a_b_c')

    def test_hyphenated_operation(self, capsys):
        code, out, _ = run(capsys, 'snake-to-camel', 'hello_world')
        assert (code, out) == (0, 'helloWorld')

    def test_title(self, capsys):
        assert run(capsys, 'title', 'hello_world')[1] == 'Hello World'

    def test_count(self, capsys):
        assert run(capsys, 'count', 'test')[1] == '4'

    def test_ends_with(self, capsys):
        assert run(capsys, 'ends_with', 'test', '-s', 'st')[1] == 'true'
        assert run(capsys, 'ends_with', 'test', '-s', 'te')[1] == 'false'

    def test_starts_with_position(self, capsys):
        assert run(capsys, 'starts_with', 'test', '-s', 'st', '-p', '2')[1] == 'true'

    def test_substring_required(self, capsys):
        code, out, err = run(capsys, 'starts_with', 'test')
        assert code == 1
        assert out == ''
        assert '--substring' in err

    def test_detect_object(self, capsys):
        assert run(capsys, 'detect_object', '{a: 1}')[1] == 'true'
        assert run(capsys, 'detect_object', '[1, 2]')[1] == 'false'

    def test_detect_object_invalid_yaml(self, capsys):
        code, _, err = run(capsys, 'detect_object', '{a: [')
        assert code == 1
        assert 'YAML error' in err

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO('helloWorld\n'))
        assert run(capsys, 'words', '-')[1] == 'hello world'

    def test_missing_config(self, capsys, tmp_path):
        code, _, err = run(capsys, 'trim', 'x', '--config', str(tmp_path / 'nope.yaml'))
        assert code == 1
        assert 'not found' in err

    def test_unknown_log_level(self, capsys, tmp_path):
        path = tmp_path / 'strkit.yaml'
        path.write_text('cli:\n  log_level: LOUD\n', encoding='utf-8')
        code, _, err = run(capsys, 'trim', 'x', '--config', str(path))
        assert code == 1
        assert 'Unknown log level' in err

    def test_null_delimiter_in_config(self, capsys, tmp_path):
        path = tmp_path / 'strkit.yaml'
        path.write_text('slugify:\n  delimiter: ~\n', encoding='utf-8')
        code, out, err = run(capsys, 'slugify', 'a b', '--config', str(path))
        assert (code, out) == (1, '')
        assert 'Cannot convert None' in err

    def test_unknown_operation(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['reverse', 'text'])
        assert exc_info.value.code == 2


class TestHelpers:
    @pytest.mark.parametrize('raw, expected', [
        ('ends-with', 'ends_with'),
        ('Capitalize-All', 'capitalize_all'),
        ('snake', 'snake'),
    ])
    def test_operation_name(self, raw, expected):
        assert operation_name(raw) == expected

    def test_format_result(self):
        assert format_result(True) == 'true'
        assert format_result(False) == 'false'
        assert format_result(3) == '3'
        assert format_result('x') == 'x'
