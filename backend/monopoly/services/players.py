from flask import current_app
from sqlalchemy import delete, update
from monopoly import db
from monopoly.models import Player, PlayerGame


def list_players():
    return [p.to_dict() for p in Player.query.all()]


def get_player(player_id):
    player = Player.query.filter_by(id=player_id).first()
    return player.to_dict() if player else None


def update_player(player_id, name, email):
    """Overwrite name and email of one player.

    Both values are written as given, including ``None``; callers must send
    the full row. Returns ``{'id': ...}`` or ``None`` if no row matched.
    """
    stmt = (
        update(Player)
        .where(Player.id == player_id)
        .values(name=name, email=email)
        .returning(Player.id)
        .execution_options(synchronize_session=False)
    )
    try:
        updated_id = db.session.execute(stmt).scalar_one_or_none()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return {'id': updated_id} if updated_id is not None else None


def create_player(name, email):
    player = Player(name=name, email=email)
    db.session.add(player)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return {'id': player.id}


def delete_player(player_id):
    """Delete a player together with its PlayerGame rows in one transaction.

    The result comes from the rows matched by the player DELETE itself. The
    PlayerGame cleanup commits even when no player matched; the result is
    ``None`` in that case.
    """
    stmt = (
        delete(Player)
        .where(Player.id == player_id)
        .returning(Player.id)
        .execution_options(synchronize_session=False)
    )
    try:
        removed = PlayerGame.query.filter_by(player_id=player_id).delete(synchronize_session=False)
        deleted_id = db.session.execute(stmt).scalar_one_or_none()
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"[delete_player] player={player_id} found={deleted_id is not None} playergame_rows={removed}")
    return {'id': deleted_id} if deleted_id is not None else None
