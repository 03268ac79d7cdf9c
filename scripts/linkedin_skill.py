# scripts/linkedin_skill.py
import sys
from browser_skill.sites import linkedin
from browser_skill.skill import BrowserSkill

skill = BrowserSkill(
    "Linkedin Automation",
    "Automates tasks on LinkedIn using a connected browser instance.",
)
linkedin.register(skill)

if __name__ == "__main__":
    sys.exit(skill.main())
