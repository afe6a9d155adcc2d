"""
Check that the configured AI provider answers.

Lists the models of every configured Ollama base URL and, unless
``--no-generate`` is given, sends a one line prompt through the same
fallback chain the app uses.
"""
import argparse
import os
import sys

import requests
from dotenv import load_dotenv

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

load_dotenv()

from flashycardy_app.config import Config
from flashycardy_app.core.error_handlers import AIServiceError
from flashycardy_app.modules.ai_generation.client import AIProviderClient


def list_models(base_url):
    try:
        response = requests.get(f"{base_url.rstrip('/')}/api/tags", timeout=5)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        print(f"[ERROR] {base_url}: {exc}")
        return None
    return [model.get('name', '') for model in response.json().get('models', [])]


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--no-generate', action='store_true', help='only list installed models')
    args = parser.parse_args(argv)

    ok = False
    for base_url in Config.AI_BASE_URLS:
        models = list_models(base_url)
        if models is None:
            continue
        ok = True
        print(f"[OK] {base_url} is running ({len(models)} models)")
        if not any(name.startswith(Config.AI_MODEL.split(':')[0]) for name in models):
            print(f"[WARN] Model '{Config.AI_MODEL}' is not installed. Run: ollama pull {Config.AI_MODEL}")

    if args.no_generate:
        return 0 if ok else 1

    client = AIProviderClient(
        base_urls=Config.AI_BASE_URLS,
        model=Config.AI_MODEL,
        api_key=Config.AI_API_KEY,
        timeout=min(Config.AI_TIMEOUT_SECONDS, 120),
        temperature=Config.AI_TEMPERATURE,
        max_tokens=200,
        endpoint_paths=Config.AI_ENDPOINT_PATHS,
    )
    try:
        text = client.generate('Reply with one flashcard in the format: Front | Back')
    except AIServiceError as exc:
        print(f"[ERROR] {exc.message}")
        return 1

    print(f"[OK] Provider answered: {text[:200]}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
