from photofinish.backend.engine.gamegenerator.generator import SHUFFLE_MOVES, GameGenerator

__all__ = ["GameGenerator", "SHUFFLE_MOVES"]
