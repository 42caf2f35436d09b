"""Static resume data for the site owner. Treated as read-only configuration."""

DATA = {
    "name": "Fazlul Karim Choudhury",
    "initials": "FKC",
    "url": "https://fazlul.vercel.app",
    "location": "Assam, India",
    "description": (
        "Full-stack developer with 1+ year experience in building scalable "
        "platforms and AI/ML projects."
    ),
    "summary": (
        "Hello! My name is Fazlul Karim Choudhury, a passionate and results-driven "
        "full-stack developer with a strong foundation in building scalable web "
        "applications and a keen interest in integrating AI/ML solutions to solve "
        "real-world problems. I recently graduated with a B.Tech in Computer Science "
        "from NEHU and have since honed my skills through hands-on experience at "
        "Automatic Data Processing (ADP) and impactful personal projects"
    ),
    "skills": [
        "React.js",
        "Next.js",
        "Typescript",
        "JavaScript",
        "TailwindCSS",
        "Shadcn",
        "Prisma",
        "Node.js",
        "Express.js",
        "Python",
        "Machine Learning",
        "langchain",
        "Gemini AI",
        "HTML5",
        "CSS3",
        "C++",
        "Java",
        "Spring Boot",
        "SQL",
        "Postgres",
        "Docker",
        "Git",
        "AWS",
        "CI/CD",
        "Agile",
    ],
    "contact": {
        "email": "fazlul0127@gmail.com",
        "tel": "+91 8486853823",
        "social": {
            "GitHub": {"name": "GitHub", "url": "https://github.com/FazlulKarimC"},
            "LinkedIn": {"name": "LinkedIn", "url": "https://www.linkedin.com/in/fazlul0127/"},
            "X": {"name": "X", "url": "https://x.com/FazlulKarim_fk"},
            "email": {"name": "Send Email", "url": "mailto:fazlul0127@gmail.com"},
        },
    },
    "work": [
        {
            "company": "ADP",
            "href": "https://www.adp.com/",
            "location": "Hyderabad, India",
            "title": "Member Technical",
            "start": "Oct 2023",
            "end": "Sept 2024",
            "description": (
                "At ADP, I served as a Member Technical where I collaborated with Agile "
                "teams to develop an employee management and tracking system. My "
                "responsibilities included designing responsive front-end components using "
                "ReactJS, JavaScript, and TypeScript, as well as building secure back-end "
                "functionalities with Spring Boot, Spring Security, and Spring Data JPA. "
                "These efforts helped streamline HR operations, reduce manual tasks by 40%, "
                "and improve overall operational efficiency by 35% for a user base of "
                "5,000 employees."
            ),
        },
    ],
    "education": [
        {
            "school": "NEHU",
            "href": "https://www.nehu.ac.in/",
            "degree": "B.Tech in Computer Science",
            "start": "2019",
            "end": "2023",
            "description": (
                "C, C++, Python, Java, Advanced Algorithms, Data Structure, Machine "
                "Learning, Artificial Intelligence, OOPS, Computer Vision, Compiler "
                "Design, Operating System, Computer Network and Mathematics"
            ),
        },
    ],
    "projects": [
        {
            "title": "PaperSightAI",
            "href": "https://papersight.vercel.app",
            "dates": "Jan 2025 - Present",
            "active": True,
            "description": (
                "PaperSight AI is a web application that summarizes and manages PDF "
                "documents with Google's Gemini AI model, helping researchers, students "
                "and professionals extract key information from lengthy documents."
            ),
            "technologies": [
                "Next.js", "Typescript", "PostgreSQL", "NeonDB", "Langchain",
                "Clerk", "TailwindCSS", "Shadcn", "Node.js", "Gemini AI",
            ],
            "links": [
                {"type": "Website", "href": "https://papersight.vercel.app"},
                {"type": "Source", "href": "https://github.com/FazlulKarimC/PaperSight_AI"},
            ],
        },
        {
            "title": "Sleek",
            "href": "https://e-commerce-app-fazlul.vercel.app/",
            "dates": "May 2025 - Present",
            "active": True,
            "description": (
                "Sleek is a full-stack e-commerce application with a Next.js frontend, a "
                "Node.js/Express backend and a PostgreSQL database managed via Prisma ORM."
            ),
            "technologies": [
                "Next.js", "Typescript", "PostgreSQL", "NeonDB", "Prisma",
                "TailwindCSS", "Shadcn", "Express.js", "Node.js", "Gemini AI",
            ],
            "links": [
                {"type": "Website", "href": "https://e-commerce-app-fazlul.vercel.app/"},
                {"type": "Source", "href": "https://github.com/FazlulKarimC/eCommerce_app"},
            ],
        },
        {
            "title": "QuickPay",
            "href": "https://github.com/FazlulKarimC/QuickPay",
            "dates": "Dec 2024 - Jan 2025",
            "active": True,
            "description": (
                "A full-stack payment platform similar to PayTM, featuring authentication, "
                "secure transactions, transaction history, and bank linking, with webhooks "
                "for real-time bank API communication and Docker/Turborepo deployment."
            ),
            "technologies": [
                "Next.js", "Typescript", "PostgreSQL", "Prisma",
                "TailwindCSS", "WebHooks", "NextAuth.js", "Node.js",
            ],
            "links": [
                {"type": "Source", "href": "https://github.com/FazlulKarimC/QuickPay"},
            ],
        },
        {
            "title": "Psychiatric Diagnosis",
            "href": "https://github.com/FazlulKarimC/Detection-of-Psychiatric-Disorder-using-ML",
            "dates": "Oct 2022 - Jan 2023",
            "active": True,
            "description": (
                "A machine learning model predicting psychiatric disorders using Logistic "
                "Regression, Decision Tree, Random Forest, and SVM, reaching 93% accuracy "
                "through feature engineering and statistical analysis."
            ),
            "technologies": [
                "Python", "Machine Learning", "Scikit-learn", "Matplotlib",
                "NumPy", "Pandas", "Jupyter", "Git", "Streamlit",
            ],
            "links": [
                {
                    "type": "Source",
                    "href": "https://github.com/FazlulKarimC/Detection-of-Psychiatric-Disorder-using-ML",
                },
            ],
        },
    ],
}
