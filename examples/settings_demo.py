"""Minimal demonstration of the settings service."""

from live_settings.api.service import ConfigState, SettingsService

if __name__ == "__main__":
    state = ConfigState(
        config={
            "systemInstruction": {"parts": [{"text": "You are a helpful assistant."}]},
            "tools": [
                {"googleSearch": {}},
                {"functionDeclarations": [{"name": "render_altair", "description": "Displays a graph",
                                           "parameters": {"properties": {"json_graph": {}}}}]},
            ],
        }
    )
    service = SettingsService.from_state(state)
    service.update_rag("The office closes at 6pm.")
    service.update_function_description("render_altair", "Displays an altair graph in json format.")
    service.select_voice("Kore")
    print("Prompt:", service.prompt)
    print("RAG:", service.rag)
    for row in service.function_declarations():
        print("Function:", row.name, list(row.parameter_names), "-", row.description)
    print("Config:", state.config)
