"""Text rendering for maps and route instructions."""

from .config import USE_COLOR
from .graph import TransitGraph
from .routing import Route

RESET = "\033[0m"

# ANSI colour per line label
LINE_COLORS = {
    "1": "\033[31m",            # red
    "2": "\033[32m",            # green
    "3": "\033[34m",            # blue
    "Interchange": "\033[35m",  # magenta
}


def line_color(line: str) -> str:
    """ANSI escape for a line, or the reset code for unknown lines."""
    return LINE_COLORS.get(line, RESET)


def colorize(text: str, line: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{line_color(line)}{text}{RESET}"


def format_map(graph: TransitGraph, color: bool = USE_COLOR) -> str:
    """Render every station with its outgoing connections."""
    result = ["\nSubway Map:"]
    for station, edges in graph.adjacency.items():
        result.append(f"{station}:")
        for edge in edges:
            label = colorize(f"Line {edge.line}", edge.line, color)
            result.append(f"    -> {edge.destination} ({label}, cost {edge.cost})")
        result.append("")
    return "\n".join(result)


def format_route(route: Route, source: str, destination: str, color: bool = USE_COLOR) -> str:
    """Render step-by-step instructions, announcing each line change."""
    if not route.reachable:
        return f"No available path from {source} to {destination}"

    result = [f"\nMinimum cost: {route.cost}", "Route Instructions:"]
    result.append(f"Start at {route.path[0][0]}")

    current_line = ""
    for i in range(1, len(route.path)):
        station, used_line = route.path[i]
        if used_line != current_line:
            label = colorize(f"Line {used_line}", used_line, color)
            if current_line:
                result.append(f"  -> At {route.path[i-1][0]}, transfer to {label}")
            else:
                result.append(f"  -> Take {label}")
            current_line = used_line
        result.append(f"  -> Arrive at {station}")

    return "\n".join(result)
