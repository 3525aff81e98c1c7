"""Application service: the top-level numbered menu.

Owns the session: who is logged in, the leaderboard loaded at start-up and
the achievements unlocked so far.  Each menu choice delegates to a handler
or a screen; domain errors from the handlers become message screens.
"""

from __future__ import annotations

import logging

from teashop.application import screens
from teashop.application.customer_generator import CustomerGenerator
from teashop.application.dto import Frame, GameReport
from teashop.application.manage_profile import ProfileHandler
from teashop.application.ports import Clock, DisplaySink, InputSource, RandomSource
from teashop.application.play_game import GameLoop
from teashop.application.progress_store import ProgressStore, SaveStatus
from teashop.application.settings import DEFAULT_SETTINGS, GameSettings
from teashop.domain.exceptions import DomainException
from teashop.domain.model.achievements import AchievementTracker
from teashop.domain.model.leaderboard import Leaderboard
from teashop.domain.model.player import Player

logger = logging.getLogger(__name__)

NEW_GAME, PROFILE, STATISTICS, TUTORIAL, LEADERBOARD, ACHIEVEMENTS, CREDITS, EXIT = range(1, 9)
LOGIN, REGISTER = 1, 2


class ShopApp:

    def __init__(
        self,
        *,
        input_source: InputSource,
        display: DisplaySink,
        clock: Clock,
        random_source: RandomSource,
        store: ProgressStore,
        settings: GameSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._input = input_source
        self._display = display
        self._clock = clock
        self._random = random_source
        self._store = store
        self._settings = settings
        self._profiles = ProfileHandler(store)

        self.current_player: Player | None = None
        self.leaderboard = Leaderboard(store.load_leaderboard())
        self.achievements = AchievementTracker()
        self.last_report: GameReport | None = None

    def run(self) -> None:
        """Show the intro, then serve the main menu until the player picks Exit."""
        self._display.present(screens.intro())
        self._clock.sleep(self._settings.intro_delay)

        while True:
            choice = self.choose(screens.main_menu(), screens.MAIN_MENU_OPTIONS)
            if choice == NEW_GAME:
                self.start_new_game()
            elif choice == PROFILE:
                self.handle_profile()
            elif choice == STATISTICS:
                self._show(screens.statistics(self.current_player or Player("Guest")))
            elif choice == TUTORIAL:
                self._show(screens.tutorial())
            elif choice == LEADERBOARD:
                self._show(screens.leaderboard(self.leaderboard.ranked()))
            elif choice == ACHIEVEMENTS:
                self._show(screens.achievements(self.achievements.unlocked))
            elif choice == CREDITS:
                self._show(screens.credits())
            elif choice == EXIT:
                self._show(screens.farewell())
                return

    # --- Menu actions ---------------------------------------------------------

    def start_new_game(self) -> GameReport | None:
        if self.current_player is None:
            self._show(screens.message("Please log in or create a profile first!"))
            self.handle_profile()
            if self.current_player is None:
                return None

        player = self.current_player
        self._show(screens.game_start(player.username, self._settings.days_per_game))

        loop = GameLoop(
            player,
            input_source=self._input,
            display=self._display,
            clock=self._clock,
            customers=CustomerGenerator(self._random, self._settings.vip_probability),
            store=self._store,
            leaderboard=self.leaderboard,
            achievements=self.achievements,
            settings=self._settings,
        )
        self.last_report = loop.run()
        return self.last_report

    def handle_profile(self) -> None:
        choice = self.choose(screens.profile_menu(), screens.PROFILE_MENU_OPTIONS)
        username = self._ask("Enter Username:" if choice == LOGIN else "New Username:")

        try:
            if choice == LOGIN:
                self.current_player = self._profiles.login(username)
                self._show(screens.message(f"Welcome back, {self.current_player.username}!"))
            else:
                player, status = self._profiles.register(username)
                self.current_player = player
                if status is SaveStatus.SAVED:
                    self._show(screens.message("Profile created!"))
                else:
                    self._show(screens.message("Profile created, but it could not be saved."))
        except DomainException as exc:
            self._show(screens.message(str(exc)))

    # --- Input helpers --------------------------------------------------------

    def choose(self, frame: Frame, options: int) -> int:
        """Show *frame* and re-prompt until the player enters 1..options."""
        self._display.present(frame)
        while True:
            raw = self._input.read_line().strip()
            try:
                selected = int(raw)
            except ValueError:
                selected = 0
            if 1 <= selected <= options:
                return selected
            logger.debug("Rejected menu selection %r", raw)
            self._display.present(frame)

    def _ask(self, prompt: str) -> str:
        self._display.present(screens.text_prompt(prompt))
        return self._input.read_line()

    def _show(self, frame: Frame) -> None:
        self._display.present(frame)
        self._input.read_line()
