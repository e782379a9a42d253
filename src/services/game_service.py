"""Orchestration of communication from the presentation layer to the game logic and the session store (and the reverse direction)."""

import logging
from typing import Callable
from uuid import UUID

from src.api.models import (
    ClickRequest,
    CoordinatesRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    SelectPieceRequest,
    SquareModel,
)
from src.clickchess.game import GameState, attempt_move, click, select_piece
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.store.repository import GameRepository

logger = logging.getLogger(__name__)

Interaction = Callable[[GameState, int, int], GameState]


class GameService:
    """Orchestration of layers for a click-to-move game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Presentation layer commands ---
    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new session."""

        # Use info in CreateGameRequest to create a new GameState, and convert into GameModel
        new_game = GameState.new_game(starting_position=request.starting_position)
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, stored_game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Retrieve the current snapshot, ex. to redraw after a page reload."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def select_piece(self, request: SelectPieceRequest) -> GameResponse:
        """A piece got clicked."""
        return self._interact(request, select_piece)

    def attempt_move(self, request: MoveRequest) -> GameResponse:
        """A destination got clicked."""
        return self._interact(request, attempt_move)

    def click(self, request: ClickRequest) -> GameResponse:
        """A cell got clicked, and the presentation layer leaves it to us to decide what that means."""
        return self._interact(request, click)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """End a session."""
        if self.repo.delete_game(request.game_id) is not None:
            logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _interact(
        self, request: CoordinatesRequest, interaction: Interaction
    ) -> GameResponse:
        """
        Same flow for every interaction:
        retrieve the stored game, rebuild the state, play the interaction, store the outcome, return the new snapshot.
        """
        stored_model = self._fetch_game(request.game_id)
        state = GameState.from_model(stored_model)

        new_state = interaction(state, request.row, request.col)

        updated_model = new_state.to_model()
        self.repo.update_game(request.game_id, updated_model)
        return self._create_game_response(request.game_id, updated_model)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Snapshot of the game for the presentation layer. Highlights are computed from scratch."""
        state = GameState.from_model(model)
        selection = (
            SquareModel(row=state.selection.square.row, col=state.selection.square.col)
            if state.selection
            else None
        )
        return GameResponse(
            game_id=game_id,
            board=state.board.to_codes(),
            active_side=state.active_side,
            selection=selection,
            legal_destinations=[
                SquareModel(row=square.row, col=square.col)
                for square in sorted(state.legal_destinations)
            ],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
