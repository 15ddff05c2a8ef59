"""Human-readable number formatting for reports."""


def format_size(size_bytes: int | float) -> str:
    """Convert bytes to human-readable string."""
    if size_bytes < 0:
        return "N/A"
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
        if size < 1024:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} EB"


def format_bitrate(bps: int | float) -> str:
    """Format bits per second with a decimal unit (bps, kbps, Mbps)."""
    if bps < 1000:
        return f"{int(bps)} bps"
    if bps < 1_000_000:
        return f"{bps / 1000:.1f} kbps"
    return f"{bps / 1_000_000:.2f} Mbps"


def format_duration(seconds: float) -> str:
    """Format seconds as HH:MM:SS.mmm."""
    hours = int(seconds // 3600)
    minutes = int(seconds % 3600 // 60)
    secs = seconds - hours * 3600 - minutes * 60
    return f"{hours:02d}:{minutes:02d}:{secs:06.3f}"
