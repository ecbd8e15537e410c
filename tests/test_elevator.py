from coursebook.exercises.elevator import (
    ButtonPressed,
    CarArrived,
    CarDoorClosed,
    CarDoorOpened,
    CarFloor,
    Direction,
    LobbyCall,
    car_arrived,
    car_door_closed,
    car_door_opened,
    car_floor_button_pressed,
    lobby_call_button_pressed,
    main,
)


def test_car_arrived():
    assert car_arrived(3) == CarArrived(3)


def test_doors():
    assert car_door_opened() == CarDoorOpened()
    assert car_door_closed() == CarDoorClosed()
    assert car_door_opened() != car_door_closed()


def test_lobby_call():
    event = lobby_call_button_pressed(0, Direction.UP)
    assert event == ButtonPressed(LobbyCall(Direction.UP, 0))
    assert event.button.direction is Direction.UP
    assert event.button.floor == 0


def test_lobby_call_direction_matters():
    assert lobby_call_button_pressed(2, Direction.UP) != lobby_call_button_pressed(
        2, Direction.DOWN
    )


def test_car_floor_button():
    assert car_floor_button_pressed(3) == ButtonPressed(CarFloor(3))


def test_main_prints_six_events(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0].startswith("A ground floor passenger has pressed the up button: ")
    assert "CarArrived(floor=3)" in lines[5]