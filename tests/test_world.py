from bounceengine.objects import Body, GameObject
from bounceengine.world import World


def test_attach_and_detach_with_check():
    world = World()
    obj = GameObject(name="A test object", id=1)
    body = Body(name="A test body", id=2)
    assert world.attach_object(obj, True) is True
    assert world.attach_object(body, True) is True
    assert world.detach_object(obj, True) is True
    assert world.detach_object(body, True) is True
    assert world.objects == []
    assert world.renderable() == ()


def test_only_renderables_listed():
    world = World()
    obj = GameObject(name="plain")
    body = Body(name="body")
    world.attach_object(obj)
    world.attach_object(body)
    assert world.objects == [obj, body]
    assert world.renderable() == (body,)


def test_detach_removes_one_occurrence():
    world = World()
    body = Body()
    world.attach_object(body)
    world.attach_object(body)
    assert world.detach_object(body, True) is False
    assert world.objects == [body]
    assert world.renderable() == (body,)


def test_detach_unknown_object_is_harmless():
    world = World()
    assert world.detach_object(GameObject(), True) is True
    assert world.detach_object(GameObject()) is True


def test_create_and_load_keep_uri(tmp_path):
    uri = str(tmp_path / "level.world")
    assert World.create(uri).uri == uri
    assert World.load(uri).uri == uri
    assert World().uri == ""


def test_reload_returns_same_world():
    world = World()
    assert world.reload() is world


def test_unload_destroys_objects():
    world = World()
    obj = GameObject(name="a", id=5)
    body = Body(name="b", id=6)
    world.attach_object(obj)
    world.attach_object(body)
    world.unload()
    assert (obj.id, body.id) == (0, 0)
    assert world.objects == []
    assert world.renderable() == ()


def test_world_is_not_renderable():
    assert World().is_renderable() is False