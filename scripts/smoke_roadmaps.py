import httpx

from scripts.smoke_utils import BASE_URL, API, safe_call, print_result, safe_json


def main() -> None:
    with httpx.Client(base_url=BASE_URL, timeout=30.0) as client:
        # Pages, docs and health
        r, err = safe_call(client, "GET", "/")
        print_result("GET / (landing page)", r, err)
        r, err = safe_call(client, "GET", "/docs")
        print_result("GET /docs", r, err)
        r, err = safe_call(client, "GET", f"{API}/health")
        print_result("GET /api/health", r, err)

        # Catalog, then walk the first navigable roadmap down to one topic
        r, err = safe_call(client, "GET", f"{API}/roadmaps")
        print_result("GET /api/roadmaps", r, err)
        cards = safe_json(r).get("roadmaps", []) if r is not None and r.status_code == 200 else []
        navigable = [card for card in cards if card.get("navigable")]
        if navigable:
            slug = navigable[0]["slug"]
            r, err = safe_call(client, "GET", f"{API}/roadmaps/{slug}")
            print_result(f"GET /api/roadmaps/{slug}", r, err)
            phases = safe_json(r).get("phases", []) if r is not None and r.status_code == 200 else []
            if phases and phases[0].get("topics"):
                phase_id = phases[0]["id"]
                topic_id = phases[0]["topics"][0]["id"]
                r, err = safe_call(client, "GET", f"{API}/roadmaps/{slug}/phases/{phase_id}")
                print_result(f"GET /api/roadmaps/{slug}/phases/{phase_id}", r, err)
                r, err = safe_call(client, "GET", f"{API}/roadmaps/{slug}/phases/{phase_id}/topics/{topic_id}")
                print_result(f"GET /api/roadmaps/{slug}/phases/{phase_id}/topics/{topic_id}", r, err)
                r, err = safe_call(client, "GET", f"/roadmap/{slug}/{phase_id}/{topic_id}")
                print_result(f"GET /roadmap/{slug}/{phase_id}/{topic_id} (page)", r, err)

        # Negative lookups
        r, err = safe_call(client, "GET", f"{API}/roadmaps/does-not-exist")
        print_result("GET /api/roadmaps/does-not-exist (expect 404)", r, err, expect=404)
        r, err = safe_call(client, "GET", f"{API}/roadmaps/javascript/phases/phase-99")
        print_result("GET /api/roadmaps/javascript/phases/phase-99 (expect 404)", r, err, expect=404)
        r, err = safe_call(client, "GET", "/roadmap/android-senior")
        print_result("GET /roadmap/android-senior (no content, expect 404)", r, err, expect=404)

        r, err = safe_call(client, "GET", f"{API}/content/schema")
        print_result("GET /api/content/schema", r, err)


if __name__ == "__main__":
    main()
