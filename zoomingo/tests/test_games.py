"""
Tests for the game lifecycle.

Tests:
- Board creation and player reuse
- Selecting scenarios
- Bingo checks and the single recorded winner
- Resuming a game
"""

import pytest
from sqlalchemy import select

from ..models.board_cell import BoardCell
from ..models.game import Game
from ..models.player import Player
from ..services.errors import (
    GameAlreadyWon,
    GameNotFound,
    InvalidBoardSize,
    InvalidPlayerName,
    NotSessionOwner,
    ScenarioNotSelectable,
)
from ..services.games import check_win, create_game, resume_game, select_scenario
from .conftest import SIZES


def non_free_ids(created):
    return [s.id for s in created.player.board if s.id != 1]


class TestCreateGame:
    @pytest.mark.parametrize("size", SIZES)
    async def test_board_layout(self, new_game, size):
        """Free scenario in the center, the rest distinct and non-free."""
        created = await new_game(size=size)
        board = created.player.board

        assert len(board) == size
        assert board[(size - 1) // 2].id == 1
        others = [s.id for i, s in enumerate(board) if i != (size - 1) // 2]
        assert len(set(others)) == size - 1
        assert all(i > 1 for i in others)

    async def test_board_persisted_in_order(self, new_game, session_factory):
        created = await new_game()

        async with session_factory() as other:
            cells = (
                await other.execute(select(BoardCell).order_by(BoardCell.position))
            ).scalars().all()
        assert [c.scenario_id for c in cells] == [s.id for s in created.player.board]
        assert all(c.selected_at is None for c in cells)

    async def test_player_reused_by_name(self, new_game, db):
        first = await new_game(name="Alice")
        second = await new_game(name="Alice")

        assert first.player.id == second.player.id
        assert first.game_id != second.game_id
        players = (await db.execute(select(Player))).scalars().all()
        assert len(players) == 1

    async def test_name_is_stripped(self, new_game):
        created = await new_game(name="  Bob  ")
        assert created.player.name == "Bob"

    async def test_default_size(self, db):
        created = await create_game(
            db, player_name="Carol", board_size=None, allowed_sizes=SIZES, default_size=25
        )
        assert len(created.player.board) == 25

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_empty_name_rejected(self, new_game, name):
        with pytest.raises(InvalidPlayerName):
            await new_game(name=name)

    @pytest.mark.parametrize("size", [0, 8, 16, 81])
    async def test_unsupported_size_rejected(self, new_game, db, size):
        with pytest.raises(InvalidBoardSize):
            await new_game(size=size)
        assert (await db.execute(select(Game))).scalars().first() is None


class TestSelectScenario:
    async def test_select_offered(self, new_game, session_factory):
        created = await new_game()
        target = non_free_ids(created)[0]

        async with session_factory() as db:
            result = await select_scenario(db, game_id=created.game_id, scenario_id=target)
        assert result.game_id == created.game_id
        assert result.scenario_id == target

    async def test_free_scenario_selectable(self, new_game, db):
        created = await new_game()
        result = await select_scenario(db, game_id=created.game_id, scenario_id=1)
        assert result.scenario_id == 1

    async def test_second_select_rejected(self, new_game, db, session_factory):
        """Accepted once, rejected after; no duplicate mark."""
        created = await new_game()
        target = non_free_ids(created)[0]

        await select_scenario(db, game_id=created.game_id, scenario_id=target)
        with pytest.raises(ScenarioNotSelectable, match=f"Could not select scenario ID: {target}"):
            await select_scenario(db, game_id=created.game_id, scenario_id=target)

        async with session_factory() as other:
            resumed = await resume_game(other, game_id=created.game_id, player_id=created.player.id)
        assert resumed.player.selected_scenarios == [target]

    async def test_not_offered_rejected(self, new_game, db, session_factory):
        created = await new_game()
        offered = {s.id for s in created.player.board}
        outside = next(i for i in range(2, 200) if i not in offered)

        with pytest.raises(ScenarioNotSelectable):
            await select_scenario(db, game_id=created.game_id, scenario_id=outside)

        async with session_factory() as other:
            marked = (
                await other.execute(select(BoardCell).where(BoardCell.selected_at.is_not(None)))
            ).scalars().all()
        assert marked == []

    async def test_unknown_game(self, db):
        with pytest.raises(GameNotFound):
            await select_scenario(db, game_id=12345, scenario_id=2)

    async def test_other_games_board_not_selectable(self, new_game, db):
        """A scenario offered only on another game's board cannot be marked."""
        first = await new_game(name="Alice")
        second = await new_game(name="Bob")
        only_first = next(
            i for i in non_free_ids(first) if i not in {s.id for s in second.player.board}
        )
        with pytest.raises(ScenarioNotSelectable):
            await select_scenario(db, game_id=second.game_id, scenario_id=only_first)


class TestCheckWin:
    async def test_no_winner_below_threshold(self, new_game, db):
        created = await new_game(size=9)
        for sid in non_free_ids(created)[:2]:
            await select_scenario(db, game_id=created.game_id, scenario_id=sid)

        result = await check_win(db, game_id=created.game_id)

        assert result.game_id == created.game_id
        assert result.winner is None
        game = await db.get(Game, created.game_id)
        assert game.winner_id is None

    async def test_empty_board_not_won(self, new_game, db):
        created = await new_game(size=25)
        assert (await check_win(db, game_id=created.game_id)).winner is None

    async def test_winner_recorded_at_threshold(self, new_game, db, session_factory):
        created = await new_game(name="Alice", size=9)
        for sid in non_free_ids(created)[:3]:
            await select_scenario(db, game_id=created.game_id, scenario_id=sid)

        result = await check_win(db, game_id=created.game_id)

        assert result.winner == "Alice"
        async with session_factory() as other:
            game = await other.get(Game, created.game_id)
        assert game.winner_id == created.player.id
        assert game.won_at is not None

    async def test_free_mark_counts_when_selected(self, new_game, db):
        """Marking the free cell explicitly counts toward the threshold."""
        created = await new_game(size=9)
        await select_scenario(db, game_id=created.game_id, scenario_id=1)
        for sid in non_free_ids(created)[:2]:
            await select_scenario(db, game_id=created.game_id, scenario_id=sid)

        assert (await check_win(db, game_id=created.game_id)).winner == "Alice"

    async def test_repeat_check_after_win_rejected(self, new_game, db):
        created = await new_game(size=9)
        for sid in non_free_ids(created)[:3]:
            await select_scenario(db, game_id=created.game_id, scenario_id=sid)
        await check_win(db, game_id=created.game_id)

        with pytest.raises(GameAlreadyWon, match="already been won"):
            await check_win(db, game_id=created.game_id)

    async def test_unknown_game(self, db):
        with pytest.raises(GameNotFound):
            await check_win(db, game_id=999)

    async def test_alice_plays_a_full_game(self, new_game, db, session_factory):
        """Create, mark, win; the decided game then rejects further marks."""
        created = await new_game(name="Alice", size=9)
        board = created.player.board
        assert len(board) == 9
        assert board[4].id == 1

        remaining = non_free_ids(created)
        for sid in remaining[:3]:
            await select_scenario(db, game_id=created.game_id, scenario_id=sid)
        assert (await check_win(db, game_id=created.game_id)).winner == "Alice"

        with pytest.raises(GameAlreadyWon):
            await select_scenario(db, game_id=created.game_id, scenario_id=remaining[3])

        async with session_factory() as other:
            resumed = await resume_game(other, game_id=created.game_id, player_id=created.player.id)
        assert set(resumed.player.selected_scenarios) == set(remaining[:3])


class TestResumeGame:
    async def test_resume_returns_board_and_marks(self, new_game, db, session_factory):
        created = await new_game(name="Dana", size=25)
        picks = non_free_ids(created)[:4]
        for sid in picks:
            await select_scenario(db, game_id=created.game_id, scenario_id=sid)

        async with session_factory() as other:
            resumed = await resume_game(other, game_id=created.game_id, player_id=created.player.id)

        assert resumed.game_id == created.game_id
        assert resumed.player.id == created.player.id
        assert resumed.player.name == "Dana"
        assert resumed.player.board == created.player.board
        assert set(resumed.player.selected_scenarios) == set(picks)

    async def test_resume_fresh_game_has_no_marks(self, new_game, db):
        created = await new_game()
        resumed = await resume_game(db, game_id=created.game_id, player_id=created.player.id)
        assert resumed.player.selected_scenarios == []

    async def test_wrong_player_rejected(self, new_game, db):
        alice = await new_game(name="Alice")
        bob = await new_game(name="Bob")

        with pytest.raises(NotSessionOwner, match=f"Player {bob.player.id} was not part of game {alice.game_id}"):
            await resume_game(db, game_id=alice.game_id, player_id=bob.player.id)

    async def test_unknown_game(self, db):
        with pytest.raises(GameNotFound):
            await resume_game(db, game_id=77, player_id=1)
