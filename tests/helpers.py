COURSE = "نام درس"
INSTRUCTOR = "استاد"


def make_page(headers, rows, table_id="scrollable"):
    """Builds a saved-page style document holding one listing table."""
    head_cells = "".join(f"<th>{h}</th>" for h in headers)
    body_rows = "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows
    )
    return (
        "<html><head><title>Offered courses</title></head><body>"
        f'<table id="{table_id}">'
        f"<thead><tr>{head_cells}</tr></thead>"
        f"<tbody>{body_rows}</tbody>"
        "</table></body></html>"
    )
