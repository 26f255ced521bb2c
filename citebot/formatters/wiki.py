"""
citebot/formatters/wiki.py

Wiki citation template formatter.

Renders a CitationFields record into the bracketed template syntax:

  {{cite journal | last1=Harris | first1=Charles R. | title=Array programming
  with NumPy | journal=Nature | year=2020 | doi=10.1038/s41586-020-2649-2 }}

Optional fields with no value are dropped here and nowhere else, so every
engine gets the same omission behaviour.

Values are trimmed and folded onto one line, and a literal "|" becomes
{{!}}. Upstream text can therefore differ slightly from the rendered value,
but a raw newline or pipe would end the field early in wiki markup.
"""

from citebot.models import CitationFields


class WikiTemplateFormatter:
    """Formatter for `{{cite ...}}` templates."""

    opening = '{{'
    closing = ' }}'
    separator = ' | '

    def format(self, fields: CitationFields) -> str:
        parts = [self.opening + fields.template_type.value]
        for entry in fields.fields:
            if not entry.is_rendered():
                continue
            parts.append(f'{entry.key}={self._clean(entry.text)}')
        return self.separator.join(parts) + self.closing

    @staticmethod
    def _clean(value: str) -> str:
        # Newlines and pipes would break the template
        return ' '.join(value.split()).replace('|', '{{!}}')


_formatter = WikiTemplateFormatter()


def format_citation(fields: CitationFields) -> str:
    """Render a CitationFields record as a wiki citation string."""
    return _formatter.format(fields)
