# scripts/hacker_news_skill.py
"""
Hacker News reader over an already-open Chrome tab.
Chrome must be running with --remote-debugging-port=9222.
"""
import sys
from browser_skill.sites import hacker_news
from browser_skill.skill import BrowserSkill

skill = BrowserSkill(
    "Hacker News Automation",
    "Automates reading and searching on Hacker News (YCombinator).",
)
hacker_news.register(skill)

if __name__ == "__main__":
    sys.exit(skill.main())
