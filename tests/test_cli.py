"""Tests for the command-line launcher."""

import json

from tick_snake.cli import _build_parser, main
from tick_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.ticks == 100
        assert args.rate is None
        assert args.keys == ""
        assert not args.quiet

    def test_play_with_flags(self):
        args = _build_parser().parse_args([
            "play", "--ticks", "5", "--rate", "30", "--seed", "3",
            "--keys", "up,left", "--quiet",
        ])
        assert args.ticks == 5
        assert args.rate == 30.0
        assert args.seed == 3
        assert args.keys == "up,left"
        assert args.quiet


class TestCLIPlay:
    def test_quiet_run(self, capsys):
        result = main([
            "play", "--ticks", "5", "--rate", "1000", "--seed", "1", "--quiet",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "Final score: 0 after 5 ticks" in out
        assert "Points:" not in out

    def test_draws_frames(self, capsys):
        result = main(["play", "--ticks", "2", "--rate", "1000", "--seed", "1"])
        assert result == 0
        out = capsys.readouterr().out
        assert out.count("Points: 0") == 2

    def test_scripted_keys(self, capsys):
        result = main([
            "play", "--ticks", "3", "--rate", "1000", "--quiet",
            "--keys", "down,bogus,right",
        ])
        assert result == 0
        assert "after 3 ticks" in capsys.readouterr().out

    def test_negative_ticks(self):
        assert main(["play", "--ticks", "-1"]) == 2

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        GameConfig(ticks_per_second=1000, seed=4).save(path)
        result = main(["play", "--ticks", "2", "--quiet", "--config", str(path)])
        assert result == 0
        assert "after 2 ticks" in capsys.readouterr().out


class TestCLIConfig:
    def test_prints_json(self, capsys):
        assert main(["config"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["cell_size"] == 20
        assert data["ticks_per_second"] == 8.0

    def test_save(self, tmp_path, capsys):
        path = tmp_path / "out" / "game.json"
        assert main(["config", "--save", str(path)]) == 0
        assert GameConfig.load(path) == GameConfig()
