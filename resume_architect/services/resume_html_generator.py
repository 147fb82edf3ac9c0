"""Service for generating resume HTML from templates."""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape
from resume_architect.models.resume_models import ResumeRecord
from resume_architect.utils.template_helpers import register_jinja_filters

RESUME_ELEMENT_ID = "resume-preview"


class ResumeHTMLGenerator:
    """Service to generate resume HTML from Jinja2 templates."""

    def __init__(self, template_dir: Path = None):
        """
        Initialize the resume HTML generator.

        Args:
            template_dir: Directory containing Jinja2 templates. Defaults to resume_architect/templates/
        """
        if template_dir is None:
            package_dir = Path(__file__).parent.parent
            template_dir = package_dir / "templates"

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html', 'xml'])
        )

        register_jinja_filters(self.env)

    def generate_html(self, resume: ResumeRecord) -> str:
        """
        Generate resume HTML from template.

        Args:
            resume: Resume record

        Returns:
            str: Rendered HTML string; the resume root element has id "resume-preview"
        """
        template = self.env.get_template("resume_template.html")
        return template.render(resume=resume, element_id=RESUME_ELEMENT_ID)
