"""
Static roadmap data definitions.

This module contains the catalog of roadmaps shown on the landing page and the
manifest of content fragments making up each roadmap that has content.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

# Landing-page catalog, in display order
ROADMAP_CATALOG: List[Dict[str, object]] = [
    {
        "slug": "dsa",
        "title": "Data Structures & Algorithms",
        "emoji": "🧠",
        "color": "#e44d26",
        "description": "Master DSA from beginner to advanced: arrays, trees, graphs, DP, and interview-level problem solving.",
        "tags": ["DSA", "Interview", "Problem Solving"],
    },
    {
        "slug": "android-senior",
        "title": "Sr. Android Developer",
        "emoji": "🤖",
        "color": "#3DDC84",
        "description": "Prepare for a Senior Android Developer role at Google: architecture, Kotlin, system design, DSA, and behavioral.",
        "tags": ["Android", "Interview", "Google"],
    },
    {
        "slug": "javascript",
        "title": "JavaScript",
        "emoji": "⚡",
        "color": "#f7df1e",
        "description": "Master JavaScript from variables to design patterns, the language of the web.",
        "tags": ["Frontend", "Backend", "Web"],
    },
    {
        "slug": "typescript",
        "title": "TypeScript",
        "emoji": "🔷",
        "color": "#3178c6",
        "description": "Add type safety to JavaScript: interfaces, generics, utility types, and best practices.",
        "tags": ["Frontend", "Backend", "Types"],
    },
    {
        "slug": "react-native-senior",
        "title": "Sr. React Native Engineer",
        "emoji": "📱",
        "color": "#61dafb",
        "description": "Prepare for a Senior / Staff React Native Engineer role: architecture, performance, internals, system design, and technical leadership.",
        "tags": ["React Native", "Interview", "Mobile"],
    },
    {
        "slug": "react",
        "title": "React",
        "emoji": "⚛️",
        "color": "#61dafb",
        "description": "Build modern UIs with components, hooks, state management, and the React ecosystem.",
        "tags": ["Frontend", "UI", "Web"],
        "comingSoon": True,
    },
    {
        "slug": "nodejs",
        "title": "Node.js",
        "emoji": "🟩",
        "color": "#68a063",
        "description": "Server-side JavaScript: APIs, Express, databases, authentication, and deployment.",
        "tags": ["Backend", "API", "Server"],
        "comingSoon": True,
    },
    {
        "slug": "python",
        "title": "Python",
        "emoji": "🐍",
        "color": "#3776ab",
        "description": "From basics to advanced Python: data structures, OOP, decorators, and real-world projects.",
        "tags": ["Backend", "Data Science", "AI"],
        "comingSoon": True,
    },
    {
        "slug": "css",
        "title": "CSS",
        "emoji": "🎨",
        "color": "#264de4",
        "description": "Master modern CSS: flexbox, grid, animations, responsive design, and advanced selectors.",
        "tags": ["Frontend", "Design", "Web"],
        "comingSoon": True,
    },
]

# Fragment manifest: slug -> ordered phase groups.
# Each group is (base fragment, continuation fragments...); continuations are
# appended to the base phase's topics in order.
ROADMAP_FRAGMENTS: Dict[str, List[Tuple[str, ...]]] = {
    "javascript": [
        ("phase-1", "phase-1b"),
        ("phase-2", "phase-2b"),
        ("phase-3",),
        ("phase-4",),
        ("phase-5",),
    ],
    "typescript": [
        ("phase-1",),
        ("phase-2",),
        ("phase-3",),
        ("phase-4",),
    ],
    "dsa": [
        ("phase-1", "phase-1b"),
        ("phase-2", "phase-2b"),
        ("phase-3", "phase-3b"),
        ("phase-4", "phase-4b"),
        ("phase-5",),
    ],
}
