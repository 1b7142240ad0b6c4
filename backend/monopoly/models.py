from monopoly import db

class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(50), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
        }

class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    time = db.Column(db.DateTime, nullable=True, server_default=db.func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'time': self.time.isoformat() if self.time else None,
        }

class PlayerGame(db.Model):
    # Column names match the lower-cased identifiers of the existing schema
    __tablename__ = 'playergame'
    game_id = db.Column('gameid', db.Integer, db.ForeignKey('game.id'), primary_key=True)
    player_id = db.Column('playerid', db.Integer, db.ForeignKey('player.id'), primary_key=True)
    score = db.Column(db.Integer, nullable=True)
