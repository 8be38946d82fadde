"""
Lexi Puzzle Server - Main Entry Point

This is the main entry point for the daily puzzle server.
It builds the engine and starts the Flask-SocketIO application.
"""

from lexi import create_app
from lexi.config import Config, validate_word_list_integrity, get_word_statistics
from lexi.utils.game_logger import game_logger


def main():
    """Main function to validate configuration and start the server."""
    try:
        print("Validating word list...")
        validate_word_list_integrity()
        print(f"✓ Word list loaded ({get_word_statistics()['total_words']} words)")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        puzzle = app.extensions['lexi']['puzzle']
        today = puzzle.load_today()
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Lexi Server Starting - storage backend '{Config.STORAGE_BACKEND}', today is day {today.day_number}")

        print(f"\nStarting Lexi Puzzle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Storage backend: {Config.STORAGE_BACKEND}")
        print(f"Today's puzzle: day {today.day_number}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Lexi Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
