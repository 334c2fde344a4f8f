"""
Site content: biography, work history, gallery and article metadata.

Everything here is built once at import time and never mutated. Article
bodies are not stored here; they live as markdown files under ARTICLES_DIR
and are joined to their metadata by id when a page is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    role: str
    avatar: str
    location: str  # IANA time zone, drives the header clock
    display_location: str
    languages: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class SocialLink:
    name: str
    icon: str
    link: str


@dataclass(frozen=True)
class Logo:
    src: str
    alt: str


@dataclass(frozen=True)
class Experience:
    company: str
    timeframe: str
    role: str
    achievements: Tuple[str, ...]
    logo: Optional[Logo] = None


@dataclass(frozen=True)
class Institution:
    name: str
    description: str


@dataclass(frozen=True)
class Skill:
    title: str
    description: str
    images: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GalleryImage:
    src: str
    alt: str
    orientation: str = "horizontal"


@dataclass(frozen=True)
class Article:
    id: int
    title: str
    description: str
    date: str
    image: str
    link: str
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Newsletter:
    display: bool
    title: str
    description: str
    email: str
    resume_url: str

    @property
    def mailto(self) -> str:
        return f"mailto:{self.email}"


@dataclass(frozen=True)
class Section:
    label: str
    title: str
    description: str


@dataclass(frozen=True)
class Home(Section):
    headline: str = ""
    subline: str = ""
    highlight: str = ""

    @property
    def subline_parts(self) -> Tuple[str, str]:
        """Text before and after the highlighted company name."""
        before, _, after = self.subline.partition("{company}")
        return before, after


@dataclass(frozen=True)
class About(Section):
    intro_title: str = "Introduction"
    intro: str = ""
    show_intro: bool = True
    show_avatar: bool = True
    work_title: str = "Work Experience"
    experiences: Tuple[Experience, ...] = ()
    show_work: bool = True
    studies_title: str = "Education"
    institutions: Tuple[Institution, ...] = ()
    show_studies: bool = True
    technical_title: str = "Technical skills"
    skills: Tuple[Skill, ...] = ()
    show_technical: bool = True


@dataclass(frozen=True)
class Gallery(Section):
    images: Tuple[GalleryImage, ...] = ()


@dataclass(frozen=True)
class Articles(Section):
    data: Tuple[Article, ...] = field(default_factory=tuple)


person = Person(
    first_name="Guanggeng",
    last_name="Yang",
    role="Senior Software Engineer",
    avatar="/images/avatar.png",
    location="America/Los_Angeles",
    display_location="Bay Area, CA",
    languages=("English", "Mandarin"),
)

newsletter = Newsletter(
    display=True,
    title="Send me a message, I'll get back to you as soon as possible.",
    description=(
        "I'm always looking for new opportunities and challenges. If you have any "
        "questions or would like to discuss a project, please don't hesitate to "
        "contact me."
    ),
    email="yangguanggeng960123@gmail.com",
    resume_url="https://drive.google.com/file/d/12ZCxWFK9ZlPVvr2YyOzAFCquCFDaVmfw/view?usp=sharing",
)

social: List[SocialLink] = [
    SocialLink(name="GitHub", icon="github", link="https://github.com/younggg96"),
    SocialLink(name="LinkedIn", icon="linkedin", link="https://www.linkedin.com/in/guanggengyang/"),
    SocialLink(name="Email", icon="email", link=newsletter.mailto),
    SocialLink(name="Instagram", icon="instagram", link="https://www.instagram.com/young_gggy"),
]

home = Home(
    label="Home",
    title=f"{person.name}'s Portfolio",
    description=f"Portfolio website showcasing my work as a {person.role}",
    headline="Senior Software Engineer & Full-Stack Architect",
    subline=(
        "I'm Guanggeng, a Senior Software Engineer at {company}, specializing in "
        "scalable architecture design and enterprise-level application development. "
        "I lead technical transformations and mentor teams while building innovative solutions."
    ),
    highlight="Vibrant Wellness",
)

about = About(
    label="About",
    title="About me",
    description=f"Meet {person.name}, {person.role} from {person.display_location}",
    intro=(
        "Guanggeng is a Fremont-based Senior Software Engineer with a passion for "
        "building scalable web applications and leading technical migrations. His "
        "work spans frontend development, system architecture, and the intersection "
        "of performance optimization and user experience. With expertise in modern "
        "JavaScript frameworks and cloud technologies, he specializes in transforming "
        "legacy systems into robust, maintainable solutions. His approach combines "
        "technical excellence with a strong focus on team collaboration and knowledge "
        "sharing, ensuring sustainable growth and innovation in every project."
    ),
    experiences=(
        Experience(
            company="Vibrant Wellness",
            timeframe="May 2024 - Present",
            role="Senior Software Engineer",
            achievements=(
                "Spearheaded the migration from a legacy Vue 2 codebase to Next.js, React, and "
                "Tailwind CSS, resolving issues like slow build performance, SEO limitations, and "
                "UI inconsistency, while significantly improving code maintainability and team "
                "efficiency through a modern, component-driven architecture.",
                "Leveraged Next.js SSR/SSG to enhance SEO and product visibility, enabling faster "
                "indexing of product pages; combined with performance optimizations such as "
                "above-the-fold content prioritization, dynamic rendering, and code splitting.",
                "Acted as frontend tech lead throughout the migration process, overseeing "
                "architecture planning and implementation, mentoring junior developers, and "
                "establishing code quality standards through code reviews and pair programming.",
                "Established frontend development standards and a centralized knowledge base by "
                "defining reusable patterns, automating code quality enforcement, and "
                "consolidating documentation for improved efficiency and cross-team collaboration.",
            ),
            logo=Logo(src="/images/companies/vibrant-wellness-logo.png", alt="Vibrant Wellness Logo"),
        ),
        Experience(
            company="Vibrant Wellness",
            timeframe="Jul 2021 - May 2024",
            role="Frontend Engineer",
            achievements=(
                "Developed a scalable e-commerce platform (vibrant-wellness.com) for the medical "
                "industry, with a strong focus on responsive design, cross-browser compatibility, "
                "and performance optimization, delivering a seamless user experience across devices.",
                "Engineered web and mobile-compatible interfaces using Vue 2, and implemented Vuex "
                "for centralized state management, resulting in improved code maintainability and "
                "streamlined feature development.",
                "Designed and implemented a Micro-Frontend architecture using JavaScript and "
                "Webpack, enabling modular development across teams and reducing code duplication "
                "by approximately 10%.",
                "Built a flexible SCSS theming system to support white-label storefronts, aligning "
                "with diverse brand requirements; collaborated closely with UX designers to "
                "maintain visual consistency and meet performance standards.",
                "Operated within a fast-paced Agile environment, contributing to sprint planning, "
                "daily standups, and backlog refinement using JIRA, ensuring timely delivery and "
                "continuous product iteration.",
            ),
            logo=Logo(src="/images/companies/vibrant-wellness-logo.png", alt="Vibrant Wellness Logo"),
        ),
        Experience(
            company="Alexander-Anderson Real Estate Group",
            timeframe="Oct 2020 - Sep 2022",
            role="Software Engineer",
            achievements=(
                "Designed and developed a cross-platform mobile application (CFREE Real Estate "
                "Exam Prep) from scratch using React Native and Expo, successfully deployed to "
                "Google Play and Apple App Store, leading to a measurable increase in user engagement.",
                "Built custom UI components with UI Kitten 5, improving rendering performance and "
                "delivering a smoother, more responsive user experience.",
                "Implemented core app functionalities including In-app Purchases, Push "
                "Notifications, Firebase Authentication, and subscription management, integrating "
                "both frontend and backend technologies to support business logic and user flows.",
                "Developed and maintained an e-commerce website (recareercenter.com) for real "
                "estate education using WordPress and PHP, enabling course purchases, content "
                "updates, and student access management.",
            ),
            logo=Logo(src="/images/companies/alexander-anderson-logo.png", alt="Alexander-Anderson Logo"),
        ),
    ),
    institutions=(
        Institution(
            name="Pace University, Seidenberg School of Computer Science and Information Systems",
            description="Master of Science in Computer Science - GPA 3.8",
        ),
        Institution(
            name="Human University of Chinese Medicine",
            description="Bachelor of Engineering in Biology - GPA 3.5",
        ),
    ),
    skills=(
        Skill(
            title="Programming Languages",
            description="JavaScript (ES6+), TypeScript, HTML5, CSS3, SQL, Python, Java, PHP, Node.js",
        ),
        Skill(
            title="Frameworks & Libraries",
            description="React, Vue.js, Angular, React Native, Redux, Next.js, Prisma, Nuxt.js",
        ),
        Skill(
            title="Tools & Others",
            description=(
                "Git, Firebase, MySQL, Express, RESTful APIs, Axios, Postman, Webpack, Vite, "
                "Babel, Jest, Tailwind CSS, Less/Sass, Agile, OOP, Figma, Adobe Photoshop, "
                "Google Analytics"
            ),
        ),
    ),
)

blog = Section(
    label="Blog",
    title="Writing about software engineering and tech...",
    description=f"Read what {person.name} has been up to recently",
)

work = Section(
    label="Work",
    title="My projects",
    description=f"Software engineering projects by {person.name}",
)

gallery = Gallery(
    label="Gallery",
    title="Gallery",
    description=f"A collection of images from {person.name}",
    images=(
        GalleryImage(src="/images/gallery/img1.jpg", alt="Architecture design showcase", orientation="horizontal"),
        GalleryImage(src="/images/gallery/img2.jpg", alt="Modern UI components", orientation="vertical"),
        GalleryImage(src="/images/gallery/img3.jpg", alt="Web development project", orientation="horizontal"),
        GalleryImage(src="/images/gallery/img4.jpg", alt="Mobile responsive design", orientation="vertical"),
    ),
)

articles = Articles(
    label="Articles",
    title="Tech Articles",
    description=(
        "A collection of technical articles, tutorials and insights about web development, "
        "architecture design and software engineering"
    ),
    data=(
        Article(
            id=0,
            title="Building Scalable React Applications",
            description=(
                "Learn how to architect large-scale React applications with best practices for "
                "state management, component organization, and performance optimization. This "
                "article covers advanced patterns and techniques for building maintainable React "
                "codebases."
            ),
            date="May 15, 2024",
            image="/images/articles/img1.jpg",
            link="/articles/0",
            tags=("React", "Architecture", "Performance"),
        ),
        Article(
            id=1,
            title="System Design: Designing the StarWidget",
            description=(
                "A walkthrough of designing a reusable star rating widget: controlled and "
                "uncontrolled modes, fractional fill, keyboard access, and submitting scores "
                "through an explicit async boundary."
            ),
            date="April 29, 2025",
            image="/images/articles/img2.jpg",
            link="/articles/1",
            tags=("System Design",),
        ),
        Article(
            id=2,
            title="Behavioral Interview Questions",
            description=(
                "A collection of behavioral interview questions that are commonly asked in "
                "technical interviews. Learn how to prepare for these questions and answer them "
                "confidently."
            ),
            date="May 1, 2025",
            image="/images/articles/img3.jpg",
            link="/articles/2",
            tags=("Behavioral Interview", "Frontend Interview"),
        ),
    ),
)
