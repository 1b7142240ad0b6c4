from flask import current_app
from sqlalchemy import delete
from monopoly import db
from monopoly.models import Game, Player, PlayerGame


def list_games():
    return [g.to_dict() for g in Game.query.order_by(Game.id).all()]


def get_game_players(game_id):
    """Players of one game with their scores, ordered by player id.

    A game without participants and an unknown game id both yield ``[]``.
    """
    rows = (
        db.session.query(Player.id, Player.name, Player.email, PlayerGame.score)
        .select_from(PlayerGame)
        .join(Player, Player.id == PlayerGame.player_id)
        .filter(PlayerGame.game_id == game_id)
        .order_by(PlayerGame.player_id)
        .all()
    )
    return [dict(row._mapping) for row in rows]


def delete_game(game_id):
    """Delete a game together with its PlayerGame rows in one transaction."""
    stmt = (
        delete(Game)
        .where(Game.id == game_id)
        .returning(Game.id)
        .execution_options(synchronize_session=False)
    )
    try:
        removed = PlayerGame.query.filter_by(game_id=game_id).delete(synchronize_session=False)
        deleted_id = db.session.execute(stmt).scalar_one_or_none()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"[delete_game] game={game_id} found={deleted_id is not None} playergame_rows={removed}")
    return {'id': deleted_id} if deleted_id is not None else None
