from photofinish.backend.engine.gamesolver.solver import Solver

__all__ = ["Solver"]
