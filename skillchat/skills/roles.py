from __future__ import annotations

# Tables are tuples of (role key, skills) so that matching walks them in
# declaration order; the first key overlapping the requested role wins.

BEGINNER_SKILLS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("software engineer", ("Programming Basics", "Git", "Data Structures", "Algorithms", "HTML CSS", "JavaScript")),
    ("sde", ("Programming Basics", "Git", "Data Structures", "Algorithms", "System Design", "Database")),
    ("data scientist", ("Python", "Statistics", "SQL", "Excel", "Data Visualization", "Machine Learning")),
    ("web developer", ("HTML", "CSS", "JavaScript", "React", "Node.js", "Git")),
    ("frontend developer", ("HTML", "CSS", "JavaScript", "React", "Git", "Responsive Design")),
    ("backend developer", ("Programming", "Database", "API", "Git", "Server", "Authentication")),
    ("mobile developer", ("Programming", "Mobile Framework", "Git", "UI Design", "API Integration", "Testing")),
    ("devops engineer", ("Linux", "Git", "Docker", "Cloud Basics", "Scripting", "Monitoring")),
    ("product manager", ("Analytics", "User Research", "Project Management", "Communication", "Market Research", "Agile")),
    ("ui/ux designer", ("Design Tools", "User Research", "Wireframing", "Prototyping", "Design Systems", "Usability Testing")),
)

ADVANCED_SKILLS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("software engineer", ("System Design", "Microservices", "Cloud Architecture", "DevOps", "Security", "Performance Optimization")),
    ("sde", ("System Design", "Distributed Systems", "Cloud Platforms", "Kubernetes", "CI/CD", "Monitoring")),
    ("data scientist", ("Deep Learning", "MLOps", "Big Data", "Cloud ML", "A/B Testing", "Model Deployment")),
    ("web developer", ("Advanced React", "GraphQL", "Microservices", "Performance", "Security", "Testing")),
    ("frontend developer", ("Advanced JavaScript", "State Management", "Performance", "Testing", "Build Tools", "Accessibility")),
    ("backend developer", ("Microservices", "Caching", "Message Queues", "Load Balancing", "Security", "Monitoring")),
    ("mobile developer", ("Advanced Frameworks", "Performance", "Security", "CI/CD", "App Store", "Analytics")),
    ("devops engineer", ("Kubernetes", "Infrastructure as Code", "Monitoring", "Security", "Automation", "Cloud Architecture")),
    ("product manager", ("Data Analytics", "A/B Testing", "Growth Hacking", "Strategy", "Leadership", "Metrics")),
    ("ui/ux designer", ("Advanced Prototyping", "Design Systems", "User Psychology", "Accessibility", "Design Ops", "Research Methods")),
)

DEFAULT_BEGINNER_SKILLS: tuple[str, ...] = (
    "Programming Basics",
    "Git",
    "Problem Solving",
    "Communication",
    "Learning Skills",
    "Project Management",
)

DEFAULT_ADVANCED_SKILLS: tuple[str, ...] = (
    "Advanced Programming",
    "System Architecture",
    "Leadership",
    "Mentoring",
    "Strategy",
    "Innovation",
)

# Scanned against raw model output when it cannot be parsed as JSON.
FALLBACK_SKILL_KEYWORDS: tuple[str, ...] = (
    "spreadsheet software",
    "data governance",
    "data visualization",
    "data analysis",
    "data collection",
    "data storage",
    "data security",
    "machine learning",
    "data-driven decision-making",
    "data architecture",
    "big data",
    "Google Sheets",
    "pivot tables",
    "charts",
    "generative AI",
    "Excel",
    "SQL",
    "Python",
    "R",
    "Tableau",
    "Power BI",
    "statistics",
)


def _match_role(
    role: str,
    table: tuple[tuple[str, tuple[str, ...]], ...],
    default: tuple[str, ...],
) -> list[str]:
    normalized_role = role.strip().lower()
    for key, skills in table:
        if key in normalized_role or normalized_role in key:
            return list(skills)
    return list(default)


def beginner_skills_for(role: str) -> list[str]:
    return _match_role(role, BEGINNER_SKILLS, DEFAULT_BEGINNER_SKILLS)


def advanced_skills_for(role: str) -> list[str]:
    return _match_role(role, ADVANCED_SKILLS, DEFAULT_ADVANCED_SKILLS)
