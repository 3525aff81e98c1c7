"""Integration tests for the GameLoop use case.

Uses scripted input, a fake clock and in-memory repositories, so a full
run replays deterministically with no terminal and no file I/O.
"""

import logging
from dataclasses import replace

import pytest

from teashop.application.customer_generator import CustomerGenerator
from teashop.application.progress_store import ProgressStore
from teashop.application.play_game import GameLoop
from teashop.application.settings import DEFAULT_SETTINGS
from teashop.domain.exceptions import ValidationError
from teashop.domain.model.achievements import AchievementTracker
from teashop.domain.model.game_state import GameState
from teashop.domain.model.leaderboard import Leaderboard
from teashop.domain.model.player import Player
from tests.fakes import (
    FakeClock,
    FakeLeaderboardRepository,
    FakePlayerRepository,
    RecordingDisplay,
    ScriptedInput,
    ScriptedRandom,
)

# Five customers, in arrival order:
#   Alice   Milk Tea          (Tea, Milk)
#   Bob     Taro Milk Tea     (Tea, Milk, Taro)                   VIP
#   Charlie Strawberry Boba   (Tea, Milk, Strawberry, Tapioca)
#   Diana   Matcha Milk Tea   (Tea, Milk, Matcha)
#   Edward  Brown Sugar Boba  (Tea, Milk, Brown Sugar, Tapioca)
VIP_ROLLS = [0.5, 0.1, 0.9, 0.5, 0.3]
NAME_AND_DRINK = [0, 0, 1, 1, 2, 3, 3, 2, 4, 4]


def _build(script, days_per_game=1, rolls_per_day=1):
    clock = FakeClock()
    player_repo = FakePlayerRepository()
    leaderboard_repo = FakeLeaderboardRepository()
    player = Player.create("alice")
    display = RecordingDisplay()
    input_source = ScriptedInput(clock, script)
    settings = replace(DEFAULT_SETTINGS.without_delays(), days_per_game=days_per_game)
    random_source = ScriptedRandom(
        VIP_ROLLS * rolls_per_day, NAME_AND_DRINK * rolls_per_day
    )

    loop = GameLoop(
        player,
        input_source=input_source,
        display=display,
        clock=clock,
        customers=CustomerGenerator(random_source, settings.vip_probability),
        store=ProgressStore(player_repo, leaderboard_repo),
        leaderboard=Leaderboard(),
        achievements=AchievementTracker(),
        settings=settings,
    )
    return loop, player, input_source, display, player_repo, leaderboard_repo


FULL_DAY_SCRIPT = [
    ("tea, milk", 2.0), "",                 # fast, correct: 150
    ("tea, milk, taro", 7.0), "",           # slow VIP, correct: 100 * 1.5
    ("tea, milk, strawberry", 1.0), "",     # missing tapioca: 0
    ("Matcha, MILK, tea", 5.0), "",         # exactly 5s, correct: 100
    ("", 1.0), "",                          # blank: 0
    "",                                     # daily summary
    "",                                     # "First Shift" unlocked
]


class TestFullDay:

    def test_daily_tally(self):
        loop, *_ = _build(FULL_DAY_SCRIPT)
        report = loop.run()

        (day,) = report.days
        assert (day.orders_made, day.orders_missed, day.score) == (3, 2, 400)

    def test_player_progress(self):
        loop, player, *_ = _build(FULL_DAY_SCRIPT)
        report = loop.run()

        assert player.total_score == 400
        assert player.days_played == 1
        assert player.games_played == 1
        assert report.total_score == 400
        assert report.rating == 4

    def test_ends_in_game_over(self):
        loop, _, input_source, *_ = _build(FULL_DAY_SCRIPT)
        report = loop.run()

        assert not report.aborted
        assert report.final_state == GameState.GAME_OVER
        assert loop.state == GameState.GAME_OVER
        assert input_source.remaining == 0

    def test_progress_persisted(self):
        loop, _, _, _, player_repo, leaderboard_repo = _build(FULL_DAY_SCRIPT)
        loop.run()

        saved = player_repo.get("alice")
        assert saved == Player("alice", total_score=400, days_played=1, games_played=1)
        assert leaderboard_repo.load() == {"alice": 400}

    def test_screens_shown(self):
        loop, _, _, display, *_ = _build(FULL_DAY_SCRIPT)
        loop.run()

        texts = display.texts()
        assert "DAY 1" in texts
        assert "Name: Bob [VIP]" in texts
        assert "RECIPE: Tea, Milk, Brown Sugar, Tapioca" in texts
        assert "DAY 1 COMPLETE" in texts
        assert "Total Score: 400" in texts
        assert "* First Shift" in texts
        assert "Rating: 4 Stars" in texts

    def test_cannot_run_twice(self):
        loop, *_ = _build(FULL_DAY_SCRIPT)
        loop.run()
        with pytest.raises(ValidationError, match="Cannot start a run"):
            loop.run()


class TestMultipleDays:

    def test_days_played_capped_by_days_per_game(self):
        day_script = FULL_DAY_SCRIPT[:-1]  # achievement screen only after day 1
        script = FULL_DAY_SCRIPT + day_script
        loop, player, input_source, *_ = _build(script, days_per_game=2, rolls_per_day=2)
        report = loop.run()

        assert [d.day for d in report.days] == [1, 2]
        assert player.days_played == 2
        assert player.total_score == 800
        assert input_source.remaining == 0


class TestAbort:

    SCRIPT = [
        ("tea, milk", 1.0), "",   # Alice served: 150
        ("  EXIT ", 0.5),         # Bob: player closes the shop
        "tea, milk", "", "tea, milk", "",
    ]

    def test_abort_halts_remaining_customers(self):
        loop, _, input_source, display, *_ = _build(self.SCRIPT, days_per_game=3)
        loop.run()

        assert input_source.remaining == 4
        texts = display.texts()
        assert "Charlie walks in." not in texts
        assert "DAY 1 COMPLETE" not in texts
        assert "DAY 2" not in texts

    def test_abort_report(self):
        loop, player, *_ = _build(self.SCRIPT, days_per_game=3)
        report = loop.run()

        assert report.aborted
        assert report.final_state == GameState.GAME_OVER
        (day,) = report.days
        assert (day.orders_made, day.orders_missed, day.score) == (1, 0, 150)
        assert player.total_score == 150
        assert player.days_played == 0
        assert report.rating == 1

    def test_abort_logged_at_debug(self, caplog):
        loop, *_ = _build(self.SCRIPT, days_per_game=3)
        with caplog.at_level(logging.DEBUG, logger="teashop.application.play_game"):
            loop.run()

        (record,) = [r for r in caplog.records if "aborted" in r.getMessage()]
        assert record.levelno == logging.DEBUG

    def test_abort_still_saves(self):
        loop, _, _, _, player_repo, leaderboard_repo = _build(self.SCRIPT, days_per_game=3)
        loop.run()

        assert player_repo.get("alice").total_score == 150
        assert leaderboard_repo.load() == {"alice": 150}


class TestPersistenceFailures:

    def test_failed_saves_do_not_interrupt_run(self):
        loop, player, _, _, player_repo, leaderboard_repo = _build(FULL_DAY_SCRIPT)
        player_repo.fail_writes = True
        leaderboard_repo.fail_writes = True

        report = loop.run()

        assert report.days[0].score == 400
        assert report.final_state == GameState.GAME_OVER
        assert player_repo.save_calls == 2  # end of day + end of game
