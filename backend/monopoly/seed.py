from datetime import datetime
from monopoly import db
from monopoly.models import Game, Player, PlayerGame


def seed_monopoly():
    """Insert a small set of players, games and scores."""
    players = [
        Player(name='Dogbreath', email='me@calvin.edu'),
        Player(name='The King', email='king@gmail.edu'),
        Player(name='Lord Ruler', email='dog@gmail.edu'),
    ]
    games = [
        Game(time=datetime(2006, 6, 27, 8, 0, 0)),
        Game(time=datetime(2006, 6, 28, 13, 20, 0)),
        Game(time=datetime(2006, 6, 29, 18, 41, 0)),
    ]
    db.session.add_all(players + games)
    db.session.flush()

    scores = [
        (games[0], players[0], 0),
        (games[0], players[1], 0),
        (games[0], players[2], 2350),
        (games[1], players[0], 1000),
        (games[1], players[1], 0),
        (games[1], players[2], 500),
        (games[2], players[1], 0),
        (games[2], players[2], 5500),
    ]
    for game, player, score in scores:
        db.session.add(PlayerGame(game_id=game.id, player_id=player.id, score=score))
    db.session.commit()
    return players, games
