# scripts/browser_skill/sites/hacker_news.py
import json
import sys
from urllib.parse import quote
from ..actions.schema import ActionParam
from ..core.script_executor import ScriptExecutor

FRONT_PAGE = "https://news.ycombinator.com/"
SEARCH_URL = "https://hn.algolia.com/?q={query}"
ITEM_URL = "https://news.ycombinator.com/item?id={story_id}"
MAX_STORIES = 30


async def wait_for(tab, class_name: str, timeout: int = 10):
    """Block until an element with the class shows up"""
    element = await tab.find(class_name=class_name, timeout=timeout, raise_exc=False)
    if not element:
        raise RuntimeError(f"Timed out waiting for .{class_name}")
    return element


async def get_top_stories(tab, args):
    """Print the front page stories as JSON"""
    count = min(args.get("count") or 10, MAX_STORIES)
    await tab.go_to(FRONT_PAGE)
    await wait_for(tab, "athing")

    stories = await ScriptExecutor.execute_json(tab, f"""
        const rows = Array.from(document.querySelectorAll('.athing')).slice(0, {int(count)});
        return JSON.stringify(rows.map(row => {{
            const titleElement = row.querySelector('.titleline > a');
            const subtext = row.nextElementSibling;
            return {{
                rank: (row.querySelector('.rank')?.textContent || '').replace('.', ''),
                title: titleElement?.textContent || '',
                url: titleElement?.getAttribute('href') || '',
                score: subtext?.querySelector('.score')?.textContent || '0 points',
                user: subtext?.querySelector('.hnuser')?.textContent || 'unknown',
                age: subtext?.querySelector('.age')?.textContent || '',
                id: row.getAttribute('id'),
            }};
        }}));
    """)
    print(json.dumps(stories or [], indent=2, ensure_ascii=False))


async def search(tab, args):
    """Top five Algolia results for a query"""
    await tab.go_to(SEARCH_URL.format(query=quote(args.query)))
    await wait_for(tab, "Story_title")

    results = await ScriptExecutor.execute_json(tab, """
        const items = Array.from(document.querySelectorAll('.Story')).slice(0, 5);
        return JSON.stringify(items.map(item => ({
            title: item.querySelector('.Story_title')?.textContent || '',
            meta: item.querySelector('.Story_meta')?.textContent || '',
            link: item.querySelector('.Story_title > a')?.getAttribute('href') || '',
        })));
    """)
    print(f'Top 5 results for "{args.query}":')
    print(json.dumps(results or [], indent=2, ensure_ascii=False))


async def read_comments(tab, args):
    story_id = args.get("storyId")
    if story_id:
        await tab.go_to(ITEM_URL.format(story_id=quote(story_id)))
    elif "item?id=" not in await ScriptExecutor.get_url(tab):
        print("Error: Please provide a storyId or navigate to a story page first.", file=sys.stderr)
        return

    await wait_for(tab, "commtext")

    comments = await ScriptExecutor.execute_json(tab, """
        const rows = Array.from(document.querySelectorAll('.comtr')).slice(0, 5);
        return JSON.stringify(rows.map(row => {
            const text = (row.querySelector('.commtext')?.textContent || '').replace(/\\s+/g, ' ').trim();
            const indent = row.querySelector('.ind')?.getAttribute('width') || '0';
            return {
                user: row.querySelector('.hnuser')?.textContent || 'unknown',
                text: text.substring(0, 200) + '...',
                indent: Math.floor(parseInt(indent) / 40),
            };
        }));
    """)

    print("Top comments:")
    for c in comments or []:
        print(f"{'  ' * c['indent']}{c['user']}: {c['text']}")


def register(skill):
    """Add the Hacker News actions to a skill"""
    skill.action(
        "getTopStories",
        "Get the top stories from the front page of Hacker News.",
        params=[ActionParam("count", f"Number of stories to retrieve (max {MAX_STORIES})", "number", default=10)],
    )(get_top_stories)

    skill.action(
        "search",
        "Search for stories on Hacker News via Algolia.",
        params=[ActionParam("query", "The search query", "string", required=True)],
    )(search)

    skill.action(
        "readComments",
        "Read top comments for a specific story ID or the current page if it is a story.",
        params=[ActionParam("storyId", "The ID of the story (optional if already on a story page)", "string")],
    )(read_comments)
    return skill
