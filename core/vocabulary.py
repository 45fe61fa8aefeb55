#!/usr/bin/env python3
"""
Default vocabulary tables for resume analysis.

These are the tables loaded into VocabularyConfig / ChronologyConfig when
config.yaml does not override them. Components never read this module
directly; they receive the tables through their configuration objects.
"""

STOP_WORDS = [
    "a", "an", "the", "and", "or", "but", "is", "are", "in", "with", "for", "to", "of",
    "on", "at", "by", "about", "as", "into", "like", "through", "after", "over", "between",
    "out", "during", "without", "before", "under", "around", "among", "who", "what", "where",
    "when", "how", "all", "any", "both", "each", "few", "more", "most", "other", "some",
    "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too", "very", "can",
    "will", "just", "should", "now",
]

TECHNICAL_SKILLS = [
    # Programming languages
    "python", "java", "javascript", "typescript", "c++", "c#", "ruby", "php", "swift", "kotlin", "go", "rust", "scala",
    "r", "matlab", "perl", "haskell", "lua", "groovy", "bash", "powershell", "dart", "objective-c", "assembly",

    # Web development
    "react", "angular", "vue", "jquery", "node", "express", "django", "flask", "spring", "rails", "asp.net",
    "html", "css", "sass", "less", "bootstrap", "tailwind", "materialui", "next.js", "gatsby", "nuxt", "svelte",
    "redux", "graphql", "rest", "soap", "oauth", "jwt", "webpack", "babel", "eslint", "jest", "mocha", "cypress",

    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "travis", "circleci", "github actions", "terraform",
    "ansible", "puppet", "chef", "prometheus", "grafana", "elk", "serverless", "lambda", "s3", "ec2", "rds",
    "dynamodb", "cloudfront", "route53", "iam", "vpc", "cloudformation", "azuredevops", "netlify", "heroku", "vercel",

    # Databases
    "sql", "postgresql", "mysql", "oracle", "mongodb", "cassandra", "redis", "elasticsearch", "neo4j", "sqlite",
    "mariadb", "cosmosdb", "firebase", "supabase", "couchdb", "hbase", "mssql", "sqlserver",

    # Data science & ML
    "tensorflow", "pytorch", "keras", "scikit-learn", "pandas", "numpy", "scipy", "matplotlib", "seaborn",
    "hadoop", "spark", "kafka", "airflow", "luigi", "dask", "opencv", "nltk", "spacy", "transformers", "huggingface",
    "machine learning", "deep learning", "neural network", "natural language processing", "computer vision",

    # Mobile
    "android", "ios", "flutter", "react native", "xamarin", "cordova", "ionic",
    "arkit", "arcore", "swiftui", "jetpack compose", "uikit", "cocoa", "material design",

    # Tooling & practices
    "git", "github", "gitlab", "bitbucket", "ci/cd", "devops", "agile", "scrum", "jira", "confluence", "trello",
    "microservices", "soa", "grpc", "api", "oop", "tdd", "bdd", "dry", "solid",

    # Specific technologies
    "blockchain", "ar/vr", "iot", "embedded", "quantum", "cybersecurity", "web3", "etl", "big data",
]

# "{skill}" is substituted with each skill name
SKILL_CONTEXT_PATTERNS = [
    "experienced with {skill}",
    "proficient in {skill}",
    "knowledge of {skill}",
    "worked with {skill}",
    "familiar with {skill}",
    "expertise in {skill}",
    "{skill} development",
    "{skill} experience",
    "{skill} skills",
]

PROFICIENCY_MARKERS = {
    "beginner": [
        "basic knowledge", "fundamentals", "introduction to", "learning", "beginner",
        "started", "exposure to", "familiar with", "some experience",
        "entry-level", "novice", "limited experience", "foundational",
    ],
    "intermediate": [
        "proficient", "competent", "skilled", "experienced", "several years",
        "working knowledge", "good understanding", "comfortable with",
        "practical knowledge", "applied", "implemented", "developed with",
        "two years", "2 years", "3 years", "three years",
    ],
    "expert": [
        "expert", "specialist", "advanced", "mastery", "extensive experience",
        "deep knowledge", "thorough understanding", "authoritative", "led",
        "architected", "designed", "mentored", "trained others", "taught",
        "five years", "5 years", "5+ years", "five+ years", "over 5 years",
        "certified", "authority", "published", "contributed", "evangelist",
    ],
}

DURATION_MARKERS = {
    "long": ["years of experience", "extensive background", "extensive experience", "veteran"],
    "medium": ["seasoned", "solid background", "solid experience"],
    "short": ["recently", "new to", "beginning to", "started learning"],
}

COMPLEXITY_MARKERS = {
    "high": ["complex", "enterprise", "large-scale", "high-volume", "mission-critical",
             "cutting-edge", "innovative", "sophisticated"],
    "medium": ["professional", "production", "multi-feature", "cross-platform"],
    "low": ["simple", "basic", "small", "straightforward"],
}

ROLE_MARKERS = {
    "leader": ["led", "managed", "directed", "architect", "principal", "head", "chief", "mentor"],
    "contributor": ["contributed", "participated", "assisted", "supported", "worked on", "member"],
}

# Score adjustment per marker category and level
MARKER_WEIGHTS = {
    "proficiency": {"beginner": -2, "intermediate": 1, "expert": 2},
    "duration": {"long": 2, "medium": 1, "short": -2},
    "complexity": {"high": 2, "medium": 1, "low": -1},
    "role": {"leader": 2, "contributor": 0},
}

DEGREES = [
    "bachelor", "master", "phd", "doctorate", "bs", "ba", "ms", "ma", "mba", "bsc", "btech", "mtech",
    "b.s.", "m.s.", "b.a.", "m.a.", "ph.d.", "b.tech", "m.tech", "b.e.", "m.e.", "associate", "diploma",
]

FIELDS_OF_STUDY = [
    "computer science", "software engineering", "information technology", "data science",
    "computer engineering", "electrical engineering", "mathematics", "statistics",
    "information systems", "cybersecurity", "artificial intelligence", "machine learning",
]

SOFT_SKILLS = [
    "communication", "teamwork", "leadership", "problem-solving", "critical thinking",
    "time management", "adaptability", "creativity", "collaboration", "emotional intelligence",
    "conflict resolution", "decision making", "presentation", "negotiation", "mentoring",
    "coaching", "strategic thinking", "analytical", "detail-oriented", "multitasking",
    "agile", "scrum", "project management", "customer service", "interpersonal",
]

SOFT_SKILL_CUES = {
    "leadership": ["led", "lead", "managed", "supervised", "director", "head of"],
    "communication": ["communicate", "presented", "wrote", "articulated", "explained"],
    "teamwork": ["team", "collaborated", "worked with", "together", "cross-functional"],
    "problem-solving": ["solved", "resolution", "addressed", "troubleshoot", "debug"],
    "adaptability": ["adapt", "flexible", "adjusted", "pivot", "dynamic environment"],
}

JOB_TITLES = [
    "software engineer", "software developer", "frontend developer", "backend developer",
    "full stack developer", "web developer", "data scientist", "data engineer",
    "devops engineer", "cloud engineer", "systems engineer", "qa engineer",
    "test engineer", "site reliability engineer", "sre", "product manager",
    "project manager", "engineering manager", "tech lead", "architect",
    "cto", "vp of engineering", "director", "lead", "senior", "junior", "principal",
]

TITLE_CONTEXT_PATTERNS = [
    "as a", "as an", "position as", "role as", "titled", "position of",
    "working as", "employed as", "job as", "career as",
]

SENIORITY_LEVELS = {
    "junior": 1,
    "mid": 2,
    "senior": 3,
    "lead": 4,
    "principal": 5,
    "manager": 5,
    "director": 6,
    "vp": 7,
    "cto": 8,
}

EDUCATION_MARKERS = [
    "education", "university", "college", "school", "degree",
    "bachelors", "masters", "phd", "graduate",
]

WORK_SECTION_HEADINGS = [
    r"work\s+experience", r"employment", r"professional\s+experience", r"work\s+history",
]

SECTION_END_HEADINGS = [
    r"education", r"skills", r"certifications?", r"languages?", r"hobbies",
]
