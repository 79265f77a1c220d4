"""Human-readable formatting of byte counts."""

KB = 1024
MB = KB * 1024
GB = MB * 1024
TB = GB * 1024


def format_size(b: int) -> str:
    """Format an integer byte count, whole bytes below one kilobyte."""
    if b < KB:
        return f"{b}  B"
    if b < MB:
        return f"{b / KB:.2f} KB"
    if b < GB:
        return f"{b / MB:.2f} MB"
    if b < TB:
        return f"{b / GB:.2f} GB"
    return f"{b / TB:.2f} TB"


def format_bytes(value: float) -> str:
    """Format a (possibly fractional) byte count with two decimals."""
    if value < KB:
        return f"{value:.2f} B"
    if value < MB:
        return f"{value / KB:.2f} KB"
    if value < GB:
        return f"{value / MB:.2f} MB"
    if value < TB:
        return f"{value / GB:.2f} GB"
    return f"{value / TB:.2f} TB"


def get_size_string(size: int) -> str:
    """Return the size with thousands separators followed by its scaled form."""
    prefix = "-" if size < 0 else ""
    grouped = f"{abs(size):,}"
    return f"{prefix}{grouped} Byte ({format_bytes(float(size))})"