from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class TrackProfile:
    key: str
    display_name: str
    recommended_course: str
    questions: Tuple[str, ...]
    keywords: Tuple[str, ...]


DEFAULT_TRACK = "fullstack"

TRACKS: Dict[str, TrackProfile] = {
    "frontend": TrackProfile(
        key="frontend",
        display_name="Frontend Development",
        recommended_course="Frontend Development with React",
        questions=(
            "Tell us about yourself and why you are interested in frontend development.",
            "Which frontend technologies have you worked with, and what did you build with them?",
            "How do you make sure a web page works well on both mobile and desktop screens?",
            "Describe a user interface you admire and explain what makes it effective.",
            "How do you keep up with changes in the frontend ecosystem?",
        ),
        keywords=(
            "html",
            "css",
            "javascript",
            "react",
            "responsive",
            "ui",
            "ux",
            "interface",
            "user",
            "component",
            "design",
            "browser",
        ),
    ),
    "backend": TrackProfile(
        key="backend",
        display_name="Backend Development",
        recommended_course="Backend Development with Node.js",
        questions=(
            "Tell us about yourself and why you are interested in backend development.",
            "Which server-side languages or frameworks have you used so far?",
            "How would you design a REST API for a simple todo application?",
            "What is the difference between SQL and NoSQL databases, and when would you pick each?",
            "How would you find out why an API endpoint has become slow?",
        ),
        keywords=(
            "api",
            "server",
            "database",
            "sql",
            "node",
            "express",
            "rest",
            "authentication",
            "performance",
            "scalable",
            "cache",
            "endpoint",
        ),
    ),
    "fullstack": TrackProfile(
        key="fullstack",
        display_name="Full Stack Development",
        recommended_course="Full Stack Web Development (MERN)",
        questions=(
            "Tell us about yourself and why you want to become a full stack developer.",
            "Describe a project where you worked on both the frontend and the backend.",
            "How does data flow from a form in the browser to the database and back?",
            "How do you decide whether logic belongs on the client or on the server?",
            "What would you like to build by the end of this program?",
        ),
        keywords=(
            "frontend",
            "backend",
            "react",
            "node",
            "database",
            "api",
            "mongodb",
            "javascript",
            "deploy",
            "full stack",
            "server",
            "client",
        ),
    ),
    "data-science": TrackProfile(
        key="data-science",
        display_name="Data Science",
        recommended_course="Data Science and Machine Learning with Python",
        questions=(
            "Tell us about yourself and what draws you to data science.",
            "Which tools or libraries have you used to analyse data?",
            "How would you handle missing values in a dataset?",
            "Explain the difference between supervised and unsupervised learning.",
            "Describe a question you would like to answer with data.",
        ),
        keywords=(
            "python",
            "pandas",
            "numpy",
            "statistics",
            "machine learning",
            "model",
            "dataset",
            "visualization",
            "regression",
            "classification",
            "analysis",
            "sql",
        ),
    ),
    "mobile": TrackProfile(
        key="mobile",
        display_name="Mobile App Development",
        recommended_course="Cross-platform Mobile Development with React Native",
        questions=(
            "Tell us about yourself and why you are interested in mobile development.",
            "Which mobile platforms or frameworks have you tried?",
            "How is designing for a phone different from designing for the web?",
            "How would you make an app work when the network connection is poor?",
            "Describe an app you use every day and one thing you would improve.",
        ),
        keywords=(
            "android",
            "ios",
            "flutter",
            "react native",
            "kotlin",
            "swift",
            "app",
            "offline",
            "mobile",
            "performance",
            "user",
            "notification",
        ),
    ),
}

ENTHUSIASM_WORDS: Tuple[str, ...] = ("excited", "passionate", "love", "enjoy", "interested", "motivated")


def resolve_track(course_track: str | None) -> TrackProfile:
    key = (course_track or "").strip().lower()
    return TRACKS.get(key, TRACKS[DEFAULT_TRACK])


ROUND_COUNT = 3
ROUND_NAMES: Dict[int, str] = {
    1: "Technical Basics",
    2: "Problem Solving",
    3: "Behavioral",
}
ROUND_BASELINES: Dict[int, int] = {1: 50, 2: 50, 3: 60}

ROUND_KEYWORDS: Dict[int, Tuple[str, ...]] = {
    1: (
        "function",
        "variable",
        "object",
        "class",
        "array",
        "async",
        "promise",
        "closure",
        "scope",
        "component",
        "state",
        "api",
    ),
    2: (
        "optimize",
        "performance",
        "complexity",
        "algorithm",
        "cache",
        "scale",
        "scalable",
        "efficient",
        "memory",
        "load",
        "index",
        "debug",
    ),
    3: (
        "team",
        "communication",
        "collaborate",
        "learn",
        "feedback",
        "deadline",
        "challenge",
        "responsibility",
        "mentor",
        "conflict",
        "adapt",
        "goal",
    ),
}

DEFAULT_TECH = "javascript"

TECH_DISPLAY_NAMES: Dict[str, str] = {
    "javascript": "JavaScript",
    "react": "React",
    "python": "Python",
    "java": "Java",
    "nodejs": "Node.js",
}

TECH_ROUNDS: Dict[str, Dict[int, Tuple[str, ...]]] = {
    "javascript": {
        1: (
            "What is the difference between let, const and var in JavaScript?",
            "Explain closures with a small example.",
            "How does the event loop handle asynchronous code?",
        ),
        2: (
            "How would you remove duplicates from a large array efficiently?",
            "A page freezes while rendering a long list. How would you investigate and fix it?",
            "How would you debounce a search input that calls an API?",
        ),
        3: (
            "Tell me about a time you had to learn a new technology quickly.",
            "How do you handle disagreement with a teammate about an implementation?",
            "Describe a project you are proud of and your role in it.",
        ),
    },
    "react": {
        1: (
            "What is the difference between state and props in React?",
            "When does a React component re-render?",
            "What problem do hooks such as useEffect solve?",
        ),
        2: (
            "How would you optimize a React list that renders thousands of rows?",
            "How would you share state between deeply nested components?",
            "A component fetches data twice on mount. How would you debug it?",
        ),
        3: (
            "Tell me about a UI you built and the feedback you received on it.",
            "How do you prioritise when several features are due at once?",
            "Describe how you would onboard onto an unfamiliar React codebase.",
        ),
    },
    "python": {
        1: (
            "What is the difference between a list and a tuple in Python?",
            "Explain how decorators work.",
            "What are generators and when would you use one?",
        ),
        2: (
            "How would you find the most frequent words in a very large text file?",
            "A script that processes CSV files is too slow. How would you speed it up?",
            "How would you design a simple rate limiter?",
        ),
        3: (
            "Tell me about a bug that took you a long time to find.",
            "How do you ask for help when you are stuck?",
            "Describe a time you received critical feedback on your code.",
        ),
    },
    "java": {
        1: (
            "What is the difference between an interface and an abstract class in Java?",
            "Explain how garbage collection works at a high level.",
            "What is the difference between == and equals()?",
        ),
        2: (
            "How would you detect a memory leak in a long-running Java service?",
            "How would you choose between ArrayList and LinkedList for a workload?",
            "How would you make a shared counter thread-safe?",
        ),
        3: (
            "Tell me about a time you worked under a tight deadline.",
            "How do you keep your team informed about your progress?",
            "Describe a situation where you had to adapt to changing requirements.",
        ),
    },
    "nodejs": {
        1: (
            "What makes Node.js suitable for I/O heavy applications?",
            "Explain middleware in Express.",
            "How do you handle errors in async/await code?",
        ),
        2: (
            "How would you scale a Node.js API that is hitting CPU limits?",
            "How would you cache responses from a slow upstream service?",
            "How would you design pagination for an endpoint returning many records?",
        ),
        3: (
            "Tell me about a time you took ownership of a production issue.",
            "How do you review a teammate's pull request?",
            "Describe your goals for the next year as a developer.",
        ),
    },
}

FALLBACK_RESPONSES: Tuple[str, ...] = (
    "Thanks for sharing that. Could you walk me through a concrete example from your own work?",
    "That's a good start. How would your approach change if the scale were ten times larger?",
    "Interesting perspective. What trade-offs did you consider before settling on that?",
    "I appreciate the detail. What would you do differently if you tackled it again?",
    "Good answer. How would you explain that idea to a non-technical teammate?",
)


def resolve_tech(selected_tech: str | None) -> str:
    key = (selected_tech or "").strip().lower().replace(".", "").replace(" ", "")
    return key if key in TECH_ROUNDS else DEFAULT_TECH


def rounds_for_tech(tech: str) -> Dict[int, List[str]]:
    return {round_no: list(questions) for round_no, questions in TECH_ROUNDS[tech].items()}
