MAIN_SCREEN = 'main'

LIN_FILENAME = 'bridge_hands.lin'
DEFAULT_NUM_BOARDS_TEXT = '3'
