from pydantic import BaseModel


class Profile(BaseModel):
    name: str
    tagline: str
    bio: str
    avatar_url: str
    email: str
    github_url: str
    linkedin_url: str
    location: str


class Experience(BaseModel):
    company: str
    logo: str
    role: str
    period: str
    responsibilities: list[str]


class Project(BaseModel):
    name: str
    description: str
    image_url: str
    tech: list[str]
    live_url: str
    source_url: str


class SkillCategory(BaseModel):
    title: str
    skills: list[str]


class CallToAction(BaseModel):
    heading: str
    text: str
    email: str
    booking_url: str


class SiteContent(BaseModel):
    profile: Profile
    experiences: list[Experience]
    projects: list[Project]
    skill_categories: list[SkillCategory]
    call_to_action: CallToAction
    navigation: list[str]
    built_with: str


PROFILE = Profile(
    name="Sohil Khan",
    tagline="23 · Engineer · Developer · Builder",
    bio=(
        "Passionate full-stack developer with 6+ years of experience building "
        "scalable web applications. Specialized in React, Node.js, and cloud "
        "architecture."
    ),
    avatar_url=(
        "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d"
        "?w=200&h=200&fit=crop"
    ),
    email="vedant@example.com",
    github_url="https://github.com",
    linkedin_url="https://linkedin.com",
    location="San Francisco, CA",
)

EXPERIENCES = [
    Experience(
        company="TechCorp",
        logo="TC",
        role="Senior Full Stack Engineer",
        period="2022 - Present",
        responsibilities=[
            "Led development of microservices architecture serving 2M+ users",
            "Reduced API response time by 60% through optimization",
            "Mentored team of 5 junior developers",
        ],
    ),
    Experience(
        company="StartupXYZ",
        logo="SX",
        role="Frontend Developer",
        period="2020 - 2022",
        responsibilities=[
            "Built responsive web apps using React and TypeScript",
            "Implemented design system used across 12+ products",
            "Improved lighthouse scores from 65 to 95+",
        ],
    ),
    Experience(
        company="Digital Agency",
        logo="DA",
        role="Junior Developer",
        period="2019 - 2020",
        responsibilities=[
            "Developed client websites using modern JavaScript frameworks",
            "Collaborated with designers to implement pixel-perfect UIs",
            "Maintained and optimized existing codebases",
        ],
    ),
]

PROJECTS = [
    Project(
        name="Cloud Dashboard",
        description=(
            "Real-time analytics platform with custom data visualization. "
            "Built for enterprise clients handling 100K+ daily active users."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1551288049-bebda4e38f71"
            "?w=800&h=400&fit=crop"
        ),
        tech=["React", "Node.js", "PostgreSQL", "Redis"],
        live_url="#",
        source_url="#",
    ),
    Project(
        name="AI Content Generator",
        description=(
            "SaaS application leveraging GPT-4 for automated content creation. "
            "Integrated payment processing and user management."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1677442136019-21780ecad995"
            "?w=800&h=400&fit=crop"
        ),
        tech=["Next.js", "OpenAI", "Stripe", "Prisma"],
        live_url="#",
        source_url="#",
    ),
    Project(
        name="E-commerce Platform",
        description=(
            "Full-featured online store with inventory management, order "
            "tracking, and admin dashboard. Optimized for mobile commerce."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1557821552-17105176677c"
            "?w=800&h=400&fit=crop"
        ),
        tech=["Vue.js", "Express", "MongoDB", "AWS"],
        live_url="#",
        source_url="#",
    ),
]

SKILL_CATEGORIES = [
    SkillCategory(
        title="Frontend",
        skills=["React.js", "Tailwind CSS", "HTML", "CSS", "Redux Toolkit"],
    ),
    SkillCategory(
        title="Backend",
        skills=[
            "Node.js",
            "Express.js",
            "MongoDB (Mongoose)",
            "PostgreSQL (Prisma)",
            "Redis",
            "Kafka",
            "Elasticsearch",
            "REST APIs",
            "WebSockets (Socket.IO)",
        ],
    ),
    SkillCategory(
        title="DevOps & Cloud",
        skills=[
            "AWS",
            "Docker",
            "Kubernetes",
            "CI/CD fundamentals",
            "Cloud Deployment (Netlify, Render)",
        ],
    ),
    SkillCategory(
        title="Tools",
        skills=["Git", "GitHub", "Postman", "VS Code", "IntelliJ IDEA"],
    ),
]

CALL_TO_ACTION = CallToAction(
    heading="Let's Work Together",
    text="Available for freelance projects and full-time opportunities",
    email="alex@example.com",
    booking_url="#",
)

SITE_CONTENT = SiteContent(
    profile=PROFILE,
    experiences=EXPERIENCES,
    projects=PROJECTS,
    skill_categories=SKILL_CATEGORIES,
    call_to_action=CALL_TO_ACTION,
    navigation=["Home", "Projects", "Blog"],
    built_with="Built with FastAPI, Jinja2 & httpx",
)
