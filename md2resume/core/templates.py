"""Catalogue of résumé presentation templates."""

from md2resume.models.template import ResumeTemplate

TEMPLATES: tuple[ResumeTemplate, ...] = (
    ResumeTemplate(id="hacker-black", name="Hacker Black", description="Dark theme with green highlights"),
    ResumeTemplate(id="terminal-white", name="Terminal White", description="Terminal-style interface"),
    ResumeTemplate(id="code-gray", name="Code Gray", description="Neutral tones, code editor look"),
    ResumeTemplate(id="github-blue", name="GitHub Blue", description="GitHub-inspired layout"),
    ResumeTemplate(id="minimal-green", name="Minimal Green", description="Fresh and minimal design"),
    ResumeTemplate(id="business-orange", name="Business Orange", description="Professional business feel"),
    ResumeTemplate(id="gradient-purple", name="Gradient Purple", description="Modern gradient effects"),
    ResumeTemplate(id="neon-red", name="Neon Red", description="Neon-lit tech aesthetic"),
)


def list_templates() -> list[ResumeTemplate]:
    """Return all available templates."""
    return list(TEMPLATES)


def get_template(template_id: str) -> ResumeTemplate | None:
    """Look up a template by ID."""
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    return None
