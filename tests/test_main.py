from parsort import main as main_module


def test_main_prints_sorted_array(capsys):
    main_module.main()
    out = capsys.readouterr().out
    assert out == "Sorted array: [16, 26, 36, 44, 51, 53, 62, 65, 69, 77, 89, 91, 106, 123]\n"


def test_default_source_is_immutable():
    assert isinstance(main_module.DEFAULT_SOURCE, tuple)
    assert len(main_module.DEFAULT_SOURCE) == 14
