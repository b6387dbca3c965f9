import os

class Config:
    # An empty DATABASE_URL leaves the score store unbound
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///leaderboard.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Read by Flask-CORS; responses carry a literal "*" origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
