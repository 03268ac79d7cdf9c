# scripts/browser_skill/sites/linkedin.py
import asyncio
import random
import sys
from ..actions.schema import ActionParam


async def click_first(tab, *, timeout: int = 5, **locators):
    """Click the first element matching any of the given pydoll locators"""
    for key, value in locators.items():
        element = await tab.find(**{key: value}, timeout=timeout, raise_exc=False)
        if element:
            await element.scroll_into_view()
            await element.click()
            return element
    raise RuntimeError(f"Element not found: {locators}")


async def click_button(tab, label: str, timeout: int = 5):
    element = await tab.find(tag_name="button", text=label, timeout=timeout, raise_exc=False)
    if not element:
        raise RuntimeError(f"Button not found: {label}")
    await element.click()
    return element


async def show_all_experiences(tab, args):
    """Expand the positions/experiences section of a profile"""
    for element_id in ("navigation-index-see-all-positions-aggregated",
                       "navigation-index-see-all-experiences"):
        element = await tab.find(id=element_id, timeout=3, raise_exc=False)
        if element:
            await element.click()
            return
    raise RuntimeError("No 'See all experiences' link on this page")


async def show_all_educations(tab, args):
    await click_first(tab, id="navigation-index-see-all-education")


async def connect(tab, args):
    """Send a connection request, with an optional note"""
    await click_button(tab, "Connect")
    note = args.get("note")
    if note:
        await click_button(tab, "Add a note")
        field = await tab.find(id="custom-message", timeout=5)
        # Human-ish typing speed
        await field.type_text(note, interval=random.uniform(0.15, 0.5))
        await asyncio.sleep(0.5)
    await click_button(tab, "Send")
    print("Connection request sent", file=sys.stderr)


async def back_to_main_profile(tab, args):
    await click_first(tab, css_selector="button[aria-label='Back to the main profile page']")


def register(skill):
    """Add the LinkedIn profile actions to a skill"""
    skill.action(
        "showAllExperiences",
        'Expands the "See all positions" or "See all experiences" section on a LinkedIn profile.',
    )(show_all_experiences)
    skill.action(
        "showAllEducations",
        'Expands the "See all education" section on a LinkedIn profile.',
    )(show_all_educations)
    skill.action(
        "connect",
        "Clicks the Connect button and optionally adds a personalized note.",
        params=[ActionParam("note", "Personalized note for the connection request", "string")],
    )(connect)
    skill.action(
        "backToMainProfile",
        "Clicks the back button to return to the main profile page from a sub-section.",
    )(back_to_main_profile)
    return skill
