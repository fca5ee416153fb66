"""Static skill tables: alias mapping and the known skill vocabulary.

Both tables are immutable. Engines take them as keyword arguments with these
as defaults so tests can substitute their own tables.
"""

from types import MappingProxyType

from services.rules import Rule, compile_rules, matching_rules, word_rule

# ---------------------------------------------------------------------------
# Alias mapping: lowercase alias -> canonical display name
# Lookup is exact on the lower-cased, trimmed token. No fuzzy matching.
# ---------------------------------------------------------------------------
SKILL_ALIASES = MappingProxyType({
    # JavaScript ecosystem
    "js": "JavaScript", "javascript": "JavaScript", "ecmascript": "JavaScript",
    "ts": "TypeScript", "typescript": "TypeScript",
    "node": "Node.js", "nodejs": "Node.js", "node.js": "Node.js",
    "react": "React", "reactjs": "React", "react.js": "React",
    "vue": "Vue.js", "vuejs": "Vue.js", "vue.js": "Vue.js",
    "angular": "Angular", "angularjs": "Angular", "angular.js": "Angular",
    "express": "Express.js", "expressjs": "Express.js", "express.js": "Express.js",
    "next": "Next.js", "nextjs": "Next.js", "next.js": "Next.js",
    "redux": "Redux", "redux toolkit": "Redux",
    "tailwind": "Tailwind CSS", "tailwindcss": "Tailwind CSS", "tailwind css": "Tailwind CSS",
    # Databases
    "mongo": "MongoDB", "mongodb": "MongoDB", "mongo db": "MongoDB",
    "postgres": "PostgreSQL", "postgresql": "PostgreSQL", "psql": "PostgreSQL",
    "mysql": "MySQL", "my sql": "MySQL",
    "sql": "SQL", "structured query language": "SQL",
    "nosql": "NoSQL", "no sql": "NoSQL",
    # Languages
    "python": "Python", "py": "Python",
    "java": "Java",
    "c++": "C++", "cpp": "C++", "cplusplus": "C++",
    "c#": "C#", "csharp": "C#", "c sharp": "C#",
    # Cloud & DevOps
    "docker": "Docker", "dockerfile": "Docker",
    "kubernetes": "Kubernetes", "k8s": "Kubernetes", "kube": "Kubernetes",
    "aws": "AWS", "amazon web services": "AWS",
    "azure": "Azure", "microsoft azure": "Azure",
    "gcp": "Google Cloud", "google cloud": "Google Cloud", "google cloud platform": "Google Cloud",
    "ci/cd": "CI/CD", "cicd": "CI/CD", "continuous integration": "CI/CD",
    # Version control
    "git": "Git", "github": "GitHub", "gitlab": "GitLab",
    # Web
    "html": "HTML", "html5": "HTML",
    "css": "CSS", "css3": "CSS",
    "rest": "REST API", "rest api": "REST API", "restful api": "REST API",
    "restful": "RESTful",
    "graphql": "GraphQL", "graph ql": "GraphQL",
    # AI / ML
    "ml": "Machine Learning", "machine learning": "Machine Learning",
    "ai": "AI", "artificial intelligence": "Artificial Intelligence",
})

# ---------------------------------------------------------------------------
# Known skill vocabulary, in display form
# ---------------------------------------------------------------------------
SKILL_VOCABULARY: tuple[str, ...] = (
    # Programming languages
    "JavaScript", "Python", "Java", "C++", "C#", "TypeScript", "PHP", "Ruby",
    "Rust", "Swift", "Kotlin", "Scala", "MATLAB", "Perl", "Dart", "Go", "Solidity",
    # Frontend
    "React", "Angular", "Vue", "Vue.js", "Svelte", "Next.js", "Nuxt.js",
    "HTML", "HTML5", "CSS", "CSS3", "SASS", "SCSS", "Tailwind CSS", "Tailwind",
    "Bootstrap", "jQuery", "Webpack", "Vite", "Redux", "MobX", "Gatsby", "Material UI",
    # Backend
    "Node.js", "Express", "Express.js", "Django", "Flask", "FastAPI",
    "Spring Boot", "Spring", "ASP.NET", ".NET", "Laravel", "Rails",
    "Ruby on Rails", "NestJS", "Fastify", "Koa",
    # Databases
    "MongoDB", "MySQL", "PostgreSQL", "SQL", "NoSQL", "SQLite", "Redis",
    "Cassandra", "DynamoDB", "Firebase", "Firestore", "Oracle", "SQL Server",
    "MariaDB", "Elasticsearch", "CouchDB", "Supabase", "Neo4j",
    # Cloud & DevOps
    "AWS", "Azure", "Google Cloud", "GCP", "Docker", "Kubernetes", "Jenkins",
    "CI/CD", "Terraform", "Ansible", "Chef", "Puppet", "CircleCI", "Travis CI",
    "GitLab CI", "GitHub Actions", "Heroku", "Vercel", "Netlify", "DigitalOcean",
    # Version control & tools
    "Git", "GitHub", "GitLab", "Bitbucket", "SVN", "Mercurial", "Figma", "Swagger",
    # Testing
    "Jest", "Mocha", "Chai", "Jasmine", "Cypress", "Selenium", "Playwright",
    "JUnit", "PyTest", "unittest", "Postman", "TestNG",
    # Mobile
    "React Native", "Flutter", "Android", "iOS", "Xamarin", "Ionic",
    # Data science & ML
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Keras",
    "Scikit-learn", "Pandas", "NumPy", "Data Analysis", "Data Science",
    "Artificial Intelligence", "NLP", "Computer Vision", "OpenCV", "OpenAI", "LLM",
    # Other
    "GraphQL", "REST API", "RESTful", "Microservices", "Agile", "Scrum",
    "JIRA", "Confluence", "Linux", "Unix", "Bash", "Shell Scripting",
    "OAuth", "JWT", "WebSockets", "Socket.io", "RabbitMQ", "Kafka",
    "API", "JSON", "XML", "YAML", "Nginx", "Apache",
)

# Terms shorter than this are too ambiguous to detect in free text ("Go", "C#")
MIN_TERM_LENGTH = 3


def build_skill_rules(vocabulary: tuple[str, ...] = SKILL_VOCABULARY) -> tuple[Rule, ...]:
    """Whole-word rules for every detectable vocabulary term."""
    return compile_rules(
        (skill for skill in vocabulary if len(skill) >= MIN_TERM_LENGTH),
        factory=word_rule,
    )


SKILL_RULES: tuple[Rule, ...] = build_skill_rules()


def find_skills(text: str, rules: tuple[Rule, ...] = SKILL_RULES) -> list[str]:
    """Vocabulary terms present in ``text``, in vocabulary order."""
    return [rule.category for rule in matching_rules(text, rules)]
