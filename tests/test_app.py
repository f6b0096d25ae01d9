"""
Application Tests - command line parsing and headless runs.
"""

import pytest

from conman import __version__
from conman.app import ConmanApp, build_parser, main
from conman.config.schema import ProfileConfigFile
from conman.core import bf2


# =============================================================================
# Argument parsing
# =============================================================================

class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.no_gui is False
        assert args.default_profile == ""
        assert args.documents_dir is None
        assert not any([
            args.purge_server_history,
            args.purge_server_favorites,
            args.purge_demo_bookmarks,
            args.disable_help_voice_overs,
            args.purge_shader_cache,
            args.purge_logo_cache,
            args.debug,
        ])

    def test_flags(self, tmp_path):
        args = build_parser().parse_args([
            "--no-gui",
            "--default-profile", "0002",
            "--purge-server-history",
            "--purge-logo-cache",
            "--documents-dir", str(tmp_path),
        ])
        assert args.no_gui
        assert args.default_profile == "0002"
        assert args.purge_server_history
        assert args.purge_logo_cache
        assert args.documents_dir == tmp_path

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


# =============================================================================
# Application
# =============================================================================

class TestConmanApp:

    def test_writes_default_configuration(self, config_dir, documents_dir):
        ConmanApp(documents_dir=documents_dir)
        assert (config_dir / "configuration.xml").is_file()

    def test_load_profiles(self, config_dir, documents_dir):
        app = ConmanApp(documents_dir=documents_dir)
        app.load_profiles()

        assert [profile.key for profile in app.profiles] == ["0001", "0002"]
        assert app.default_profile_key == "0001"

    def test_demo_bookmark_max_age(self, config_dir, documents_dir):
        app = ConmanApp(documents_dir=documents_dir)
        app.settings.demo_bookmark_max_age_days = 3
        assert app.demo_bookmark_max_age.days == 3


# =============================================================================
# Headless runs
# =============================================================================

class TestMainNoGui:

    def run(self, documents_dir, *flags):
        return main(["--no-gui", "--documents-dir", str(documents_dir), *flags])

    def test_without_actions(self, config_dir, documents_dir):
        assert self.run(documents_dir) == 0
        assert (config_dir / "conman.log").is_file()

    def test_profile_actions_apply_to_default_profile(self, config_dir, documents_dir, handler):
        assert self.run(
            documents_dir,
            "--purge-server-history",
            "--purge-server-favorites",
            "--disable-help-voice-overs",
        ) == 0

        general_con = handler.read_profile_config("0001", ProfileConfigFile.GENERAL)
        assert not general_con.has_key(bf2.GENERAL_CON_KEY_SERVER_HISTORY)
        assert not general_con.has_key(bf2.GENERAL_CON_KEY_FAVORITE_SERVER)
        assert general_con.has_key(bf2.GENERAL_CON_KEY_VOICE_OVER_HELP_PLAYED)

    def test_set_default_profile(self, config_dir, documents_dir, handler):
        assert self.run(documents_dir, "--default-profile", "0002") == 0
        assert bf2.read_default_profile_key(handler) == "0002"

    def test_actions_follow_new_default_profile(self, config_dir, documents_dir, handler):
        # Profile 0002 has no General.con, so purging its history fails
        assert self.run(documents_dir, "--default-profile", "0002", "--purge-server-history") == 1

        assert bf2.read_default_profile_key(handler) == "0002"
        general_con = handler.read_profile_config("0001", ProfileConfigFile.GENERAL)
        assert general_con.has_key(bf2.GENERAL_CON_KEY_SERVER_HISTORY)

    def test_invalid_default_profile(self, config_dir, documents_dir, handler):
        assert self.run(documents_dir, "--default-profile", "0009", "--purge-server-favorites") == 1

        # The remaining actions still run against the current default profile
        assert bf2.read_default_profile_key(handler) == "0001"
        general_con = handler.read_profile_config("0001", ProfileConfigFile.GENERAL)
        assert not general_con.has_key(bf2.GENERAL_CON_KEY_FAVORITE_SERVER)

    def test_purge_demo_bookmarks_without_file(self, config_dir, documents_dir):
        assert self.run(documents_dir, "--purge-demo-bookmarks") == 0

    def test_global_actions(self, config_dir, documents_dir, handler):
        logo = handler.build_base_path() / "LogoCache" / "www.example.com"
        shader = handler.build_base_path() / "mods" / "bf2" / "cache" / "a1b2c3"
        logo.mkdir(parents=True)
        shader.mkdir(parents=True)

        assert self.run(documents_dir, "--purge-shader-cache", "--purge-logo-cache") == 0

        assert not logo.exists()
        assert not shader.exists()

    def test_startup_failure(self, config_dir, tmp_path):
        # No Battlefield 2 folder at all
        assert self.run(tmp_path / "empty") == 1

    def test_invalid_default_reference(self, config_dir, documents_dir):
        global_con = documents_dir / "Battlefield 2" / "Profiles" / "Global.con"
        global_con.write_bytes(b'GlobalSettings.setDefaultUser "abcd"\r\n')

        assert self.run(documents_dir) == 1
