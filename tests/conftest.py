import os

# Run pygame without a real display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
