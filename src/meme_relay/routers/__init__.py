from .memes import router as memes_router

_routers = [memes_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
