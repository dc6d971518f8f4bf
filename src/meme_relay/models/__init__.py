from .meme import Meme, meme_field

__all__ = ["Meme", "meme_field"]
