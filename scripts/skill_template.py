# scripts/skill_template.py
"""
Starting point for a new browser skill.
Copy next to your own actions, fill in the name and handlers, then run:

    python skill_template.py --action generateSkillMarkdown
"""
import sys
from browser_skill.actions.schema import ActionParam
from browser_skill.skill import BrowserSkill

skill = BrowserSkill(
    "<Your skill name>",
    "<Skill description>",
)

# Register actions here


@skill.action("<action name>", "<action description>")
async def simple_action(tab, args):
    pass


@skill.action(
    "<action name with params>",
    "<action description>",
    params=[ActionParam("<param name>", "<param description>", "string")],
)
async def action_with_params(tab, args):
    pass


if __name__ == "__main__":
    sys.exit(skill.main())
