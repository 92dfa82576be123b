"""Tests for dracula_palette.core.env: .env loading, walk-up logic, and settings."""

import os
from pathlib import Path

import pytest
from dracula_palette.core.env import DEFAULT_STANDARDS, Settings, find_dotenv, load_env, load_settings, parse_dotenv


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\nFOO=bar  # trailing\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}

    def test_hash_inside_quotes_kept(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('COLOUR="#ff5555" # red\n')
        assert parse_dotenv(f) == {'COLOUR': '#ff5555'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export DRACULA_PALETTE_THEME=alucard\n')
        assert parse_dotenv(f) == {'DRACULA_PALETTE_THEME': 'alucard'}

    def test_blank_and_malformed_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('\nNOEQUALS\nFOO=bar\n\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_cwd(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        # .env is above .git, so it is outside the repo
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (tmp_path / '.env').write_text('X=1\n')
        subdir = repo / 'src'
        subdir.mkdir()
        assert find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        # .git as a file (worktree)
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        subdir = repo / 'src'
        subdir.mkdir()
        assert find_dotenv(subdir) is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv


class TestLoadEnv:
    @pytest.fixture(autouse=True)
    def isolated_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, 'environ', dict(os.environ))

    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_DRACULA_KEY', raising=False)
        (tmp_path / '.env').write_text('TEST_DRACULA_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_DRACULA_KEY') == 'secret'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_DRACULA_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_DRACULA_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_DRACULA_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_DRACULA_KEY3', raising=False)
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_DRACULA_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TEST_DRACULA_KEY3') == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'absent.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings == Settings()
        assert settings.standards == DEFAULT_STANDARDS == ('material', 'hsluv', 'oklch')

    def test_values(self) -> None:
        settings = load_settings(
            {
                'DRACULA_PALETTE_THEME': 'Alucard',
                'DRACULA_PALETTE_STANDARDS': 'oklch, cam16-ucs ,',
                'DRACULA_PALETTE_FORMAT': 'HSL',
            }
        )
        assert settings == Settings(theme='alucard', standards=('oklch', 'cam16-ucs'), color_format='hsl')

    def test_blank_values_use_defaults(self) -> None:
        assert load_settings({'DRACULA_PALETTE_STANDARDS': ' , ', 'DRACULA_PALETTE_THEME': ''}) == Settings()

    @pytest.mark.parametrize(
        'env',
        [
            {'DRACULA_PALETTE_THEME': 'solarized'},
            {'DRACULA_PALETTE_STANDARDS': 'material,pantone'},
            {'DRACULA_PALETTE_FORMAT': 'cmyk'},
        ],
    )
    def test_invalid_values(self, env: dict[str, str]) -> None:
        with pytest.raises(ValueError):
            load_settings(env)

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('DRACULA_PALETTE_FORMAT', 'rgb')
        monkeypatch.delenv('DRACULA_PALETTE_THEME', raising=False)
        monkeypatch.delenv('DRACULA_PALETTE_STANDARDS', raising=False)
        assert load_settings().color_format == 'rgb'
