# tests/integration/test_scenarios.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Optional
from unittest.mock import ANY, MagicMock

import pytest

from simplestate import CallbackState, Machine, State, UnknownIdentifierError


class TestScenarios:
    def test_basic_walkthrough(self):
        """Register A and B, start in A, move to B, then fail to reach C."""
        state_a = MagicMock(spec=["initialize", "load_state", "unload_state"])
        state_b = MagicMock(spec=["initialize", "load_state", "unload_state"])
        machine = Machine()
        machine.register("A", state_a)
        machine.register("B", state_b)

        machine.start("A")
        state_a.load_state.assert_called_once_with(None, ANY, {})
        assert machine.current_state == "A"

        machine.transition_to("B")
        state_a.unload_state.assert_called_once_with("B", {})
        state_b.load_state.assert_called_once_with("A", ANY, {})
        assert machine.current_state == "B"

        with pytest.raises(UnknownIdentifierError):
            machine.transition_to("C")
        assert machine.current_state == "B"

    def test_game_loop(self):
        """A title screen, a level with a score, and a game-over screen."""

        class Title(State):
            def load_state(self, previous_id, transition_fn, shared_data):
                shared_data["plays"] = shared_data.get("plays", 0) + 1
                self.start_game = transition_fn

        class Level(State):
            def initialize(self, shared_data):
                shared_data["high_score"] = 0

            def load_state(self, previous_id, transition_fn, shared_data):
                self.score = 0
                self.lose = lambda: transition_fn("game_over")

            def unload_state(self, next_id, shared_data):
                shared_data["high_score"] = max(shared_data["high_score"], self.score)

        class GameOver(State):
            def load_state(self, previous_id, transition_fn, shared_data):
                self.came_from = previous_id
                self.final = shared_data["high_score"]
                self.restart = lambda: transition_fn("title")

        title, level, over = Title(), Level(), GameOver()
        machine = Machine()
        machine.register("title", title)
        machine.register("level", level)
        machine.register("game_over", over)

        machine.start("title")
        title.start_game("level")
        level.score = 40
        level.lose()
        assert machine.current_state == "game_over"
        assert over.came_from == "level"
        assert over.final == 40

        over.restart()
        title.start_game("level")
        level.score = 25
        level.lose()
        assert over.final == 40

        over.restart()
        assert machine.current_state == "title"

        # Shared data persists across all of the transitions above
        seen = {}
        machine.register("probe", CallbackState(on_initialize=seen.update))
        assert seen == {"plays": 3, "high_score": 40}

    def test_transition_interception(self):
        """An override sees every request a state makes, and forwards it."""
        requests = []

        def animated(target):
            requests.append(target)
            machine.transition_to(target)

        machine = Machine(transition_fn=animated)
        machine.register("intro", CallbackState(on_load=lambda prev, go, data: go("menu")))
        machine.register("menu", State())

        machine.start("intro")

        assert requests == ["menu"]
        assert machine.current_state == "menu"

    def test_numeric_and_enum_like_identifiers(self):
        machine = Machine()
        machine.register(1, State())
        machine.register(("room", 2), State())
        machine.start(1)
        machine.transition_to(("room", 2))
        assert machine.current_state == ("room", 2)

    def test_redirecting_states_settle(self):
        """States that redirect on load end in the last target, each loaded once."""
        loads = []

        def redirect(to: Optional[str]):
            def _load(prev, go, data):
                loads.append(prev)
                if to:
                    go(to)

            return _load

        machine = Machine()
        machine.register("boot", CallbackState(on_load=redirect("auth")))
        machine.register("auth", CallbackState(on_load=redirect("home")))
        machine.register("home", CallbackState(on_load=redirect(None)))

        machine.start("boot")

        assert loads == [None, "boot", "auth"]
        assert machine.current_state == "home"
