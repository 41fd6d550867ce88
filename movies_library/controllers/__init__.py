from movies_library.controllers.movies_library import MoviesLibraryController

__all__ = ["MoviesLibraryController"]
