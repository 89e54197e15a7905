def render_table(columns, rows):
    widths = [
        max([len(column)] + [len(row.get(column, '')) for row in rows])
        for column in columns
    ]

    def line(cells):
        return ' '.join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [
        line(columns),
        line('-' * width for width in widths),
    ]
    for row in rows:
        lines.append(line(row.get(column, '') for column in columns))

    return '\n'.join(lines)


def table_width(text):
    return max((len(line) for line in text.splitlines()), default=0)


def render_month(block):
    table = render_table(block.columns, block.rows)
    header = block.label.center(table_width(table)).rstrip()
    return f'{header}\n{table}'


def render_calendar(blocks):
    return '\n\n'.join(render_month(block) for block in blocks)
