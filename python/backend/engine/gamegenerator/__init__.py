from backend.engine.gamegenerator.generator import GameGenerator, Shuffle

__all__ = ["GameGenerator", "Shuffle"]
