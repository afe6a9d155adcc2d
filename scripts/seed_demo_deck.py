"""
Seed the "Cities of the Netherlands" demo deck.

Creates the demo user when missing and adds a deck pairing each city with
its province.

Usage:
    python scripts/seed_demo_deck.py [--username demo] [--password demo-password]
"""
import argparse
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashycardy_app import create_app
from flashycardy_app.extensions import db
from flashycardy_app.models import User
from flashycardy_app.modules.decks.services import DeckService

DECK_NAME = 'Cities of the Netherlands'
DECK_DESCRIPTION = 'Learn about major cities in the Netherlands'

DUTCH_CITIES = [
    ('Amsterdam', 'Noord-Holland'),
    ('Rotterdam', 'Zuid-Holland'),
    ('Den Haag', 'Zuid-Holland'),
    ('Utrecht', 'Utrecht province'),
    ('Eindhoven', 'Noord-Brabant'),
    ('Groningen', 'Groningen province'),
    ('Tilburg', 'Noord-Brabant'),
    ('Almere', 'Flevoland'),
    ('Breda', 'Noord-Brabant'),
    ('Nijmegen', 'Gelderland'),
    ('Enschede', 'Overijssel'),
    ('Apeldoorn', 'Gelderland'),
    ('Haarlem', 'Noord-Holland'),
    ('Arnhem', 'Gelderland'),
    ('Amersfoort', 'Utrecht province'),
    ('Maastricht', 'Limburg'),
    ('Leiden', 'Zuid-Holland'),
    ('Dordrecht', 'Zuid-Holland'),
    ('Zwolle', 'Overijssel'),
    ('Delft', 'Zuid-Holland'),
]


def seed(username, password):
    app = create_app()
    with app.app_context():
        user = User.query.filter_by(username=username).first()
        if user is None:
            user = User(username=username, email=f'{username}@example.com')
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            print(f"Created user '{username}'.")

        deck = DeckService.create_deck(
            user.user_id,
            DECK_NAME,
            description=DECK_DESCRIPTION,
            cards=[{'front': city, 'back': province} for city, province in DUTCH_CITIES],
        )
        print(f"Created deck {deck.deck_id} with {len(deck.cards)} cards:")
        for card in deck.cards:
            print(f"   {card.front} -> {card.back}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Seed the demo deck')
    parser.add_argument('--username', default='demo')
    parser.add_argument('--password', default='demo-password')
    args = parser.parse_args()
    seed(args.username, args.password)
