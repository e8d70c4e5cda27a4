"""
Static learning-path catalog loaded by scripts/seed_learning_paths.py.
"""

LEARNING_PATHS = [
    {
        "title": "Introduction to Web Development",
        "description": "Learn the basics of building websites and web applications.",
        "interest": "Technology",
        "modules": [
            {"module_id": "tech-101", "title": "HTML Basics", "description": "Learn the structure of web pages.", "xp_value": 20},
            {"module_id": "tech-102", "title": "CSS Fundamentals", "description": "Style your web pages.", "xp_value": 25},
            {"module_id": "tech-103", "title": "JavaScript Essentials", "description": "Add interactivity to your sites.", "xp_value": 30},
            {"module_id": "tech-104", "title": "Intro to React", "description": "Build powerful user interfaces.", "xp_value": 40},
        ],
    },
    {
        "title": "Fundamentals of Digital Art",
        "description": "Explore the world of digital creativity and design.",
        "interest": "Art",
        "modules": [
            {"module_id": "art-101", "title": "Intro to Digital Painting", "description": "Learn digital brushes and layers.", "xp_value": 20},
            {"module_id": "art-102", "title": "Color Theory for Artists", "description": "Understand how colors work together.", "xp_value": 25},
            {"module_id": "art-103", "title": "Character Design Basics", "description": "Create your own unique characters.", "xp_value": 30},
        ],
    },
    {
        "title": "The World of Science",
        "description": "Discover the wonders of biology, chemistry, and physics.",
        "interest": "Science",
        "modules": [
            {"module_id": "sci-101", "title": "Biology: The Cell", "description": "The basic building block of life.", "xp_value": 20},
            {"module_id": "sci-102", "title": "Chemistry: The Atom", "description": "Understanding matter at its core.", "xp_value": 25},
            {"module_id": "sci-103", "title": "Physics: Forces and Motion", "description": "How the universe moves.", "xp_value": 30},
        ],
    },
    {
        "title": "Exploring Mathematics",
        "description": "Journey through the most important concepts in mathematics.",
        "interest": "Mathematics",
        "modules": [
            {"module_id": "math-101", "title": "Algebra Fundamentals", "description": "The language of symbols.", "xp_value": 20},
            {"module_id": "math-102", "title": "Geometry and Shapes", "description": "Understanding space and form.", "xp_value": 25},
            {"module_id": "math-103", "title": "Introduction to Calculus", "description": "The study of change.", "xp_value": 35},
        ],
    },
]
