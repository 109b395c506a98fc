from __future__ import annotations

from typing import Dict, List, Tuple

PROJECT_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    "software_project": (
        "Project planning and requirements gathering",
        "Set up development environment",
        "Create initial architecture and design",
        "Implement core functionality",
        "Write unit tests",
        "Integration testing",
        "Documentation and README",
        "Code review and refactoring",
        "Deployment and release preparation",
        "Post-launch monitoring and feedback",
    ),
    "marketing_campaign": (
        "Define campaign objectives and KPIs",
        "Research target audience and competitors",
        "Develop campaign messaging and positioning",
        "Create content calendar and timeline",
        "Design marketing materials and assets",
        "Set up tracking and analytics",
        "Launch campaign across channels",
        "Monitor campaign performance",
        "Analyze results and optimize",
        "Prepare campaign report and learnings",
    ),
    "event_planning": (
        "Define event goals and success metrics",
        "Set budget and get approvals",
        "Choose venue and book date",
        "Create event timeline and schedule",
        "Invite speakers and plan agenda",
        "Set up registration and ticketing",
        "Plan catering and logistics",
        "Create marketing and promotional materials",
        "Coordinate day-of-event logistics",
        "Post-event follow-up and feedback collection",
    ),
    "research_project": (
        "Define research questions and hypotheses",
        "Literature review and background research",
        "Design research methodology",
        "Gather and organize data sources",
        "Conduct primary research and data collection",
        "Analyze data and identify patterns",
        "Draw conclusions and validate findings",
        "Write research report or paper",
        "Peer review and feedback incorporation",
        "Present findings and publish results",
    ),
}

CUSTOM_TEMPLATE = "custom"

DEFAULT_CUSTOM_TODOS: Tuple[str, ...] = (
    "Define project scope and objectives",
    "Create project plan",
    "Execute project tasks",
    "Review and finalize project",
)


def template_names() -> List[str]:
    return [*PROJECT_TEMPLATES, CUSTOM_TEMPLATE]
