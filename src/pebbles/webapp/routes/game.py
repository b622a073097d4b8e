"""Game routes - init, action and state entries as JSON endpoints."""

from flask import Blueprint, jsonify, request

from pebbles.models.actions import format_event_for_display

from ..services.game_service import get_game_service

bp = Blueprint("game", __name__, url_prefix="/games")


@bp.route("", methods=["GET"])
def list_games():
    """List stored games, optionally filtered with ?status=in_progress|finished."""
    status = request.args.get("status")
    return jsonify({"games": get_game_service().list_games(status=status)})


@bp.route("", methods=["POST"])
def create_game():
    """Start a new game from a PebblesInit body."""
    game_id, state = get_game_service().create_game(request.get_json(silent=True))
    return jsonify({"game_id": game_id, "state": state.to_dict()}), 201


@bp.route("/<game_id>/state", methods=["GET"])
def game_state(game_id: str):
    """Read-only state query."""
    return jsonify(get_game_service().get_state(game_id).to_dict())


@bp.route("/<game_id>/actions", methods=["POST"])
def submit_action(game_id: str):
    """Submit a Turn, GiveUp or Restart action."""
    event, state = get_game_service().submit_action(game_id, request.get_json(silent=True))
    return jsonify({
        "event": event.model_dump(mode="json"),
        "message": format_event_for_display(event),
        "state": state.to_dict(),
    })


@bp.route("/<game_id>", methods=["DELETE"])
def delete_game(game_id: str):
    get_game_service().delete_game(game_id)
    return "", 204
