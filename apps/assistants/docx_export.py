import re
from io import BytesIO

from docx import Document
from docx.shared import Inches, Pt

BOLD_RE = re.compile(r'(\*\*.*?\*\*)')


class SopDocxService:
    """Turns generated SOP text into a Word document."""
    FONT_NAME = "Aptos"
    FONT_SIZE_BODY = Pt(11)
    FONT_SIZE_HEADING = Pt(12)

    def _set_font(self, run, size=None, bold=False):
        run.font.name = self.FONT_NAME
        run.font.size = size or self.FONT_SIZE_BODY
        run.font.bold = bold

    def _add_runs(self, paragraph, text, size=None, bold=False):
        # **text** becomes a bold run
        for part in BOLD_RE.split(text):
            if part.startswith('**') and part.endswith('**') and len(part) > 4:
                self._set_font(paragraph.add_run(part[2:-2]), size=size, bold=True)
            elif part:
                self._set_font(paragraph.add_run(part), size=size, bold=bold)

    @staticmethod
    def is_heading(line):
        """A line that is bold from end to end, e.g. ``**CONCLUSION**``."""
        return (line.startswith('**') and line.endswith('**') and len(line) > 4
                and '**' not in line[2:-2])

    def create_docx(self, content):
        doc = Document()
        style = doc.styles['Normal']
        style.font.name = self.FONT_NAME
        style.font.size = self.FONT_SIZE_BODY

        for section in doc.sections:
            section.top_margin = Inches(1)
            section.bottom_margin = Inches(1)
            section.left_margin = Inches(1)
            section.right_margin = Inches(1)

        for line in content.split('\n'):
            stripped = line.strip()
            if not stripped:
                continue

            if self.is_heading(stripped):
                p = doc.add_paragraph()
                p.paragraph_format.space_before = Pt(10)
                p.paragraph_format.space_after = Pt(4)
                self._add_runs(p, stripped, size=self.FONT_SIZE_HEADING)
                continue

            if stripped.startswith('- '):
                p = doc.add_paragraph(style='List Bullet')
                p.paragraph_format.space_after = Pt(1)
                self._add_runs(p, stripped[2:])
                continue

            p = doc.add_paragraph()
            p.paragraph_format.space_after = Pt(6)
            self._add_runs(p, stripped)

        buffer = BytesIO()
        doc.save(buffer)
        buffer.seek(0)
        return buffer
