# logger.py

# This will hold a reference to the running TerrainPreview instance.
_preview = None

def set_preview(preview):
    """Sets the global preview for the logger to use."""
    global _preview
    _preview = preview

def log(message):
    """Prints a message with the current generation number if available."""
    # Check if the preview has been set and has generated at least one grid.
    if _preview and _preview.generation_count > 0:
        gen_str = f"[Gen {_preview.generation_count:04d}]"
        print(f"{gen_str} {message}")
    else:
        # For messages logged before the first grid is built.
        print(f"[Start] {message}")
