# core/formatters.py

# pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_section_heading(number: int, title: str) -> str:
    return f"\n{number}. {title}:"


# === number formatters ===


def format_points(points: float) -> str:
    return f"{points:.2f}"
