"""Screen builders for every Frame the game can show.

Pure functions from game data to a Frame.  Nothing here reads input or
touches the display.
"""

from __future__ import annotations

from collections.abc import Iterable

from teashop.application.dto import Frame
from teashop.domain.model.leaderboard import LeaderboardEntry
from teashop.domain.model.order import Customer
from teashop.domain.model.player import Player

PRESS_ENTER = "Press Enter..."
MAIN_MENU_OPTIONS = 8
PROFILE_MENU_OPTIONS = 2

LOGO = (
    "   ___           _     _         ",
    "  | _ ) __ _ _ _(_)__| |_ __ _   ",
    "  | _ \\/ _` | '_| (_-<  _/ _` |  ",
    "  |___/\\__,_|_| |_/__/\\__\\__,_|  ",
)


# --- Menus ---------------------------------------------------------------------


def main_menu() -> Frame:
    return Frame.of(
        "",
        "MILK TEA SHOP",
        "",
        "1. Start New Game",
        "2. Login / Register",
        "3. View Statistics",
        "4. Tutorial",
        "5. Leaderboard",
        "6. Achievements",
        "7. Credits",
        "8. Exit",
        "",
        prompt=f"Select an option [1-{MAIN_MENU_OPTIONS}]",
    )


def profile_menu() -> Frame:
    return Frame.of(
        "",
        "USER PROFILE",
        "",
        "1. Login",
        "2. Register",
        "",
        prompt=f"Select Option [1-{PROFILE_MENU_OPTIONS}]",
    )


def text_prompt(prompt: str) -> Frame:
    return Frame.of("", prompt=prompt)


def message(text: str) -> Frame:
    return Frame.of("", text, "", prompt=PRESS_ENTER)


# --- Information pages -----------------------------------------------------------


def statistics(player: Player) -> Frame:
    return Frame.of(
        "PLAYER STATS",
        "",
        f"Name: {player.username}",
        f"Total Score: {player.total_score}",
        f"Days Played: {player.days_played}",
        f"Games Played: {player.games_played}",
        f"Rating: {player.calculate_rating()} Stars",
        "",
        prompt=PRESS_ENTER,
    )


def tutorial() -> Frame:
    return Frame.of(
        "TUTORIAL",
        "",
        "1. Read the customer's order and its recipe.",
        "2. Type every ingredient, separated by commas.",
        "3. Press Enter. Serving in under 5 seconds earns a bonus.",
        "VIP customers pay 1.5x for a correct drink.",
        "Type 'exit' at any order to close the shop early.",
        "",
        prompt=PRESS_ENTER,
    )


def leaderboard(entries: Iterable[LeaderboardEntry]) -> Frame:
    rows = [f"{rank}. {entry.username} : {entry.score}"
            for rank, entry in enumerate(entries, start=1)]
    if not rows:
        rows = ["No scores yet."]
    return Frame.of("LEADERBOARD", "", *rows, "", prompt=PRESS_ENTER)


def achievements(unlocked: Iterable[str]) -> Frame:
    rows = [f"* {name}" for name in unlocked] or ["Nothing unlocked yet."]
    return Frame.of("ACHIEVEMENTS", "", *rows, "", prompt=PRESS_ENTER)


def credits() -> Frame:
    return message("Created by the Milk Tea Shop team.")


def farewell() -> Frame:
    return message("Thanks for playing!")


# --- Cutscenes -------------------------------------------------------------------


def intro() -> Frame:
    return Frame.of(*LOGO, "", "The Ultimate Barista Simulator", "", "Loading...")


def game_start(username: str, days_per_game: int) -> Frame:
    return Frame.of(
        f"Welcome, {username}.",
        "You have just opened your first shop.",
        f"The rent is due in {days_per_game} days.",
        "Make the best tea in the city.",
        "",
        prompt="Press Enter to open shop...",
    )


def day_transition(day: int) -> Frame:
    return Frame.of("", "", f"DAY {day}", "", "The sun rises...")


def customer_arrival(customer: Customer) -> Frame:
    return Frame.of(
        "The door opens...",
        "",
        "      ( ^_^ )      ",
        "       / | \\       ",
        "        / \\        ",
        "",
        f"{customer.name} walks in.",
    )


def happy_customer() -> Frame:
    return Frame.of("", "   \\(^o^)/   ", "Thank you!!", "")


def unhappy_customer() -> Frame:
    return Frame.of("", "   (>_<)   ", "This isn't what I ordered!", "")


def ending(rating: int) -> Frame:
    return Frame.of(
        "GAME OVER", "", f"Rating: {rating} Stars", "", "Thank you for playing!"
    )


# --- Service ---------------------------------------------------------------------


def take_order(customer: Customer) -> Frame:
    order = customer.order
    return Frame.of(
        "NEW CUSTOMER ARRIVED!",
        "",
        f"Name: {customer.display_name}",
        f'Greeting: "{customer.greeting}"',
        "",
        f"ORDER: {order.drink_name}",
        f"RECIPE: {', '.join(order.required_ingredients)}",
        "",
        prompt="Type ingredients (comma separated):",
    )


def order_result(customer: Customer, earned: int) -> Frame:
    if customer.order.was_correct:
        body = ("ORDER SUCCESS!", "", f"Score Earned: {earned}", "Customer is happy!")
    else:
        body = ("ORDER FAILED!", "", "You missed an ingredient.", "Customer left angry.")
    return Frame.of(*body, "", prompt="Press Enter to continue...")


def daily_summary(day: int, orders_made: int, orders_missed: int, score: int) -> Frame:
    return Frame.of(
        f"DAY {day} COMPLETE",
        "",
        f"Orders Made: {orders_made}",
        f"Orders Missed: {orders_missed}",
        f"Total Score: {score}",
        "",
        prompt="Press Enter for next day...",
    )


def achievements_unlocked(names: Iterable[str]) -> Frame:
    return Frame.of(
        "ACHIEVEMENT UNLOCKED!", "", *(f"* {name}" for name in names), "",
        prompt=PRESS_ENTER,
    )
