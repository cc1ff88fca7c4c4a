import time
import argparse
from core.scene import RenderSettings
from core.image import save_image
from scene_builders.reference_scene_builder import ReferenceSceneBuilder, load_scene_file
from renderers.base_renderer import RendererFactory

# 렌더러 모듈들 import (등록을 위해)
import renderers.cpu_renderer


def main(argv=None):
    parser = argparse.ArgumentParser(description='Whitted-style Ray Tracer')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='렌더러 선택')
    parser.add_argument('--scene',
                        choices=['spheres', 'boxes', 'both'],
                        default='spheres',
                        help='기준 장면 선택')
    parser.add_argument('--scene-file', default=None,
                        help='JSON 장면 파일 (지정하면 --scene 무시)')
    parser.add_argument('--width', '-w', type=int, default=640,
                        help='이미지 가로 크기')
    parser.add_argument('--height', type=int, default=480,
                        help='이미지 세로 크기')
    parser.add_argument('--depth', '-d', type=int, default=20,
                        help='최대 재귀 깊이')
    parser.add_argument('--output', '-o', default='untitled.ppm',
                        help='출력 파일명 (.ppm 또는 Pillow가 아는 형식)')

    args = parser.parse_args(argv)

    # 렌더링 설정
    settings = RenderSettings(
        width=args.width,
        height=args.height,
        max_depth=args.depth
    )

    # 씬 생성
    scene_builder = ReferenceSceneBuilder()
    if args.scene_file:
        print(f"장면 파일 로드: {args.scene_file}")
        scene = load_scene_file(args.scene_file)
    else:
        print(f"장면 생성 중: {args.scene}")
        if args.scene == 'boxes':
            scene = scene_builder.build_box_scene()
        elif args.scene == 'both':
            scene = scene_builder.build_combined_scene()
        else:
            scene = scene_builder.build_scene()

    camera = scene_builder.create_camera(settings.width, settings.height, settings.fov)

    # 렌더러 생성
    print(f"렌더러 생성: {args.renderer}")
    renderer = RendererFactory.create(args.renderer)

    print(f"지원 기능: {', '.join(renderer.get_capabilities())}")

    # 렌더링 실행
    start_time = time.time()
    image = renderer.render(scene, camera, settings)
    end_time = time.time()

    # 결과 저장
    save_image(args.output, image)
    print(f"이미지 저장: {args.output}")

    # 실행 시간 출력
    elapsed = end_time - start_time
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    print(f"총 실행 시간: {minutes}분 {seconds:.2f}초")

    if elapsed > 0:
        primary_rays = settings.width * settings.height
        print(f"성능: {primary_rays / elapsed / 1e3:.2f}K primary rays/sec")

    return 0


if __name__ == "__main__":
    main()
