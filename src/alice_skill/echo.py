"""Demo handler: repeats what the user said. Default for `alice-skill serve`."""

from alice_skill.models.request import InputData, RequestType
from alice_skill.models.response import OutputData, new_output, new_response

GREETING = "Привет! Скажите что-нибудь, и я повторю."
STOP_WORDS = {"хватит", "стоп"}


def echo(input_data: InputData) -> OutputData:
    request = input_data.request
    if request.type == RequestType.BUTTON_PRESSED:
        response = new_response(f"Нажата кнопка: {request.command or request.original_utterance}")
    elif not request.command:
        response = new_response(GREETING)
    elif request.command in STOP_WORDS:
        response = new_response("До свидания!", end_session=True)
    else:
        response = new_response(request.command)
    response.add_button("Хватит", hide=True)
    return new_output(input_data, response)
