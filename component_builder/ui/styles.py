"""CSS styles for the builder TUI."""

APP_CSS = """
Screen {
    background: $background;
}

#main {
    padding: 1 4;
}

#greeting {
    text-style: bold;
    color: $text;
}

#headline {
    text-style: bold;
    color: $accent;
    margin-bottom: 1;
}

#hint {
    color: $text-muted;
    margin-bottom: 1;
}

#prompt-cards {
    height: auto;
    margin-bottom: 1;
}

.prompt-card {
    width: 1fr;
    height: 5;
    margin-right: 1;
    border: round $border;
    background: $surface;

    &:hover {
        border: round $accent;
    }
}

#composer {
    height: auto;
    border: round $border;
    padding: 0 1;

    &:focus-within {
        border: round $accent;
    }
}

#prompt-input {
    height: 8;
    border: none;
}

#toolbar {
    height: 3;
    align: right middle;
    border-top: solid $border;
}

#toolbar Button {
    margin-left: 1;
}

#char-count {
    width: auto;
    color: $text-muted;
    padding: 1 1 0 1;
}

#generate-button {
    min-width: 6;
}

#result {
    height: auto;
    margin-top: 1;
    border: round $border;
    padding: 0 1;
}

#result-header {
    height: auto;
}

#result-meta {
    width: 1fr;
    height: auto;
}

#result-description {
    text-style: bold;
}

#result-details {
    color: $text-muted;
}

#result-header Button {
    margin-left: 1;
}

#result-code {
    height: auto;
    padding: 1;
    background: $panel;
}

#result-footer {
    height: auto;
    align: right middle;
    margin-top: 1;
}
"""
