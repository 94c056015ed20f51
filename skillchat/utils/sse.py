def sse(event: str, data: str) -> str:
    # Multi-line payloads need one data: field per line.
    lines = "\n".join(f"data: {line}" for line in data.split("\n"))
    return f"event: {event}\n{lines}\n\n"
