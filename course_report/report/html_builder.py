# course_report/report/html_builder.py

from bs4 import BeautifulSoup

from course_report.utils.config import PAGE_CONFIG

SHELL = "<!DOCTYPE html><html><head></head><body></body></html>"


class ReportDocument:
    """
    Builds the report page as a BeautifulSoup tree.

    Text only ever enters the tree as string nodes (`tag.string = ...`), so the
    serializer escapes `<`, `>` and `&` in cell values; nothing scraped from an
    export can inject markup into the report.
    """

    def __init__(self, page_config=None, with_assets=True):
        self.page_config = page_config or PAGE_CONFIG
        self.soup = BeautifulSoup(SHELL, 'html.parser')
        self.soup.html['lang'] = self.page_config['lang']
        self._build_head(with_assets)

    @property
    def body(self):
        return self.soup.body

    def tag(self, tag_name, text=None, **attrs):
        """Creates a detached tag; `class_` maps to the HTML class attribute."""
        if 'class_' in attrs:
            attrs['class'] = attrs.pop('class_')
        element = self.soup.new_tag(tag_name, attrs=attrs)
        if text is not None:
            element.string = str(text)
        return element

    def _build_head(self, with_assets):
        cfg = self.page_config
        head = self.soup.head

        head.append(self.tag('meta', charset='utf-8'))
        head.append(self.tag('meta', name='viewport', content='width=device-width, initial-scale=1.0'))
        head.append(self.tag('title', cfg['title']))
        if not with_assets:
            return

        head.append(self.tag('script', src=cfg['tailwind_src']))

        for i, host in enumerate(cfg['font_hosts']):
            link = self.tag('link', rel='preconnect', href=host)
            # The font file host is cross-origin
            if i > 0:
                link['crossorigin'] = ''
            head.append(link)

        head.append(self.tag('link', href=cfg['font_stylesheet'], rel='stylesheet'))
        head.append(self.tag('style', cfg['style']))

    def heading(self, text, class_):
        self.body.append(self.tag('h1', text, class_=class_))

    def render(self):
        return str(self.soup)


def build_table(doc, display_columns):
    """
    Appends an empty report table (header filled, body empty) to the page.

    Returns:
        Tag: The <tbody> to append rows to.
    """
    wrapper = doc.tag('div', class_='mt-10')
    table = doc.tag('table', class_='table-auto w-full bg-white shadow-md rounded border-collapse')
    thead = doc.tag('thead')
    header_row = doc.tag('tr', class_='bg-gray-200 text-right')
    for name in display_columns:
        header_row.append(doc.tag('th', name, class_='px-4 py-2 whitespace-nowrap'))
    thead.append(header_row)

    tbody = doc.tag('tbody')
    table.append(thead)
    table.append(tbody)
    wrapper.append(table)
    doc.body.append(wrapper)
    return tbody


def data_row(doc, cells):
    tr = doc.tag('tr', class_='border-b')
    for cell in cells:
        tr.append(doc.tag('td', cell, class_='px-4 py-2 whitespace-nowrap'))
    return tr
