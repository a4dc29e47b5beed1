from topgrade.remote import async_ssh_args, ssh_args


def test_ssh_args_basic():
    assert ssh_args("box", "topgrade") == [
        "-t",
        "box",
        "env",
        "TOPGRADE_PREFIX=box",
        "$SHELL",
        "-lc",
        "topgrade",
    ]


def test_ssh_args_with_extra_arguments():
    args = ssh_args("box", "topgrade", "-p 2222  -A")
    assert args[:4] == ["-t", "box", "-p", "2222"]
    assert args[4] == "-A"
    assert args[5:] == ["env", "TOPGRADE_PREFIX=box", "$SHELL", "-lc", "topgrade"]


def test_ssh_args_empty_extra_arguments():
    assert ssh_args("box", "topgrade", "") == ssh_args("box", "topgrade", None)


def test_ssh_args_topgrade_path_last():
    args = ssh_args("host", "~/.cargo/bin/topgrade", "-v")
    assert args[-1] == "~/.cargo/bin/topgrade"
    assert args[-2] == "-lc"


def test_async_ssh_args_wraps():
    inner = ssh_args("box", "topgrade")
    wrapped = async_ssh_args(inner)
    assert wrapped[0] == "ssh"
    assert wrapped[-1] == "--keep"
    assert wrapped[1:-1] == inner


def test_async_ssh_args_does_not_modify_input():
    inner = ["-t", "box"]
    async_ssh_args(inner)
    assert inner == ["-t", "box"]