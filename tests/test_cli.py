"""Tests for the textcal command line."""

import locale
from datetime import date

import pytest

from cli import build_parser, main
from test_table import MARCH_2024


@pytest.fixture(autouse=True)
def c_locale(monkeypatch):
    monkeypatch.setenv('LC_ALL', 'C')
    yield
    locale.setlocale(locale.LC_TIME, 'C')


def run(capsys, *argv, today=date(2024, 3, 15), environ=None):
    assert main(list(argv), today=today, environ=environ or {}) == 0
    return capsys.readouterr().out


class TestMain:
    def test_defaults_to_current_month_with_today_marked(self, capsys):
        out = run(capsys, '-f', 'sunday')

        assert out == MARCH_2024 + '\n'

    def test_range_of_months(self, capsys):
        out = run(capsys, '2024-01-20', '2024-03-02', '-D', '2024-03-15')

        headers = [line.strip() for line in out.splitlines() if line.strip().endswith('2024') and '-' not in line]
        assert headers == ['January 2024', 'February 2024', 'March 2024']

    def test_end_before_start_prints_nothing(self, capsys):
        assert run(capsys, '2024-06-01', '2024-05-01') == ''

    def test_highlight_days_and_ranges(self, capsys):
        out = run(capsys, '2024-06-01', '-d', '3-5', '-d', '20', '-D', '2024-06-04')

        assert '[03]' in out and '[04]' in out and '[05]' in out and '[20]' in out
        assert '*04*' not in out

    def test_explicit_highlight_date_replaces_today(self, capsys):
        out = run(capsys, '2024-03-01', '-D', '2024-03-20')

        assert '*20*' in out
        assert '*15*' not in out

    def test_first_day_from_environment(self, capsys):
        out = run(capsys, '2024-03-01', environ={'CAL_FIRST_DAY': 'sun'})

        assert out.splitlines()[1].startswith('Sun')

    def test_flag_overrides_environment(self, capsys):
        out = run(capsys, '2024-03-01', '-f', 'wed', environ={'CAL_FIRST_DAY': 'sun'})

        assert out.splitlines()[1].startswith('Wed')

    def test_locale_default_is_monday(self, capsys):
        out = run(capsys, '2024-03-01')

        assert out.splitlines()[1].startswith('Mon')


class TestErrors:
    @pytest.mark.parametrize('argv', [
        ['2024-02-30'],
        ['2024-03-01', 'soon'],
        ['-f', 'funday'],
        ['-d', '40'],
        ['-D', '03/15/2024'],
    ])
    def test_bad_arguments_exit_with_usage_error(self, capsys, argv):
        with pytest.raises(SystemExit) as exc:
            main(argv, environ={})

        assert exc.value.code == 2
        assert 'invalid' in capsys.readouterr().err

    def test_bad_environment_first_day(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['2024-03-01'], environ={'CAL_FIRST_DAY': 'someday'})

        assert exc.value.code == 2
        assert 'CAL_FIRST_DAY' in capsys.readouterr().err


def test_parser_help_mentions_options():
    text = build_parser().format_help()

    assert '--first-day' in text
    assert '--highlight-day' in text
    assert '--highlight-date' in text
